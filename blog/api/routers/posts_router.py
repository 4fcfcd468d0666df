from fastapi import APIRouter, Depends, Query, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from blog.deps import current_user, post_service
from blog.models.auth import User
from blog.models.response import (
    MessageResponse,
    Page,
    PostMessageResponse,
    PostResponse,
)
from blog.permissions import authorize_post_owner
from blog.schemas.post_schema import CreatePost, UpdatePost
from blog.services.post_service import PostFilters, PostService, page_count

MAX_PAGE_SIZE = 100

router = APIRouter()


def _split_tags(tags: str | None) -> list[str]:
    if not tags:
        return []
    return [tag.strip() for tag in tags.split(",") if tag.strip()]


@router.get("", response_model=Page, status_code=status.HTTP_200_OK)
def get_posts(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=MAX_PAGE_SIZE),
    category: str | None = None,
    author: str | None = None,
    search: str | None = None,
    tags: str | None = None,
    service: PostService = Depends(post_service),
) -> Page:
    filters = PostFilters(
        category=category, author=author, tags=_split_tags(tags), search=search
    )
    posts, total = service.get_posts(filters, page, limit)
    return Page(
        count=len(posts),
        total=total,
        page=page,
        pages=page_count(total, limit),
        data=posts,
    )


@router.get("/{uuid}", response_model=PostResponse, status_code=status.HTTP_200_OK)
def get_post(uuid: str, service: PostService = Depends(post_service)) -> PostResponse:
    return PostResponse(data=service.view_post(uuid))


@router.post(
    "", response_model=PostMessageResponse, status_code=status.HTTP_201_CREATED
)
def create_post(
    create_model: CreatePost,
    user: User = Depends(current_user),
    service: PostService = Depends(post_service),
) -> JSONResponse:
    post = service.create_post(create_model, user.id)
    return JSONResponse(
        content=jsonable_encoder(
            PostMessageResponse(message="Post created successfully", data=post)
        ),
        status_code=status.HTTP_201_CREATED,
        headers={"Location": f"/api/posts/{post.id}"},
    )


@router.put(
    "/{uuid}", response_model=PostMessageResponse, status_code=status.HTTP_200_OK
)
def update_post(
    uuid: str,
    update_model: UpdatePost,
    user: User = Depends(current_user),
    service: PostService = Depends(post_service),
) -> PostMessageResponse:
    authorize_post_owner(user, service.get_post(uuid), "update")
    post = service.update_post(uuid, update_model)
    return PostMessageResponse(message="Post updated successfully", data=post)


@router.delete(
    "/{uuid}", response_model=MessageResponse, status_code=status.HTTP_200_OK
)
def delete_post(
    uuid: str,
    user: User = Depends(current_user),
    service: PostService = Depends(post_service),
) -> MessageResponse:
    authorize_post_owner(user, service.get_post(uuid), "delete")
    service.delete_post(uuid)
    return MessageResponse(message="Post deleted successfully")
