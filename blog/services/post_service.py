import math
import uuid
from dataclasses import dataclass, field
from typing import Any

import pendulum
from aws_lambda_powertools import Logger
from boto3.dynamodb.conditions import Attr, ConditionBase
from botocore.exceptions import ClientError

from blog.exceptions import (
    PostNotFoundException,
    SlugAlreadyExistsException,
    ValidationException,
)
from blog.models.post import Post, make_slug
from blog.repositories.post_repository import PostRepository
from blog.schemas.post_schema import CreatePost, UpdatePost


@dataclass
class PostFilters:
    category: str | None = None
    author: str | None = None
    tags: list[str] = field(default_factory=list)
    search: str | None = None


class FilterExpressions:
    PUBLISHED = Attr("is_published").eq(True)

    @staticmethod
    def build(filters: PostFilters) -> ConditionBase:
        expression = FilterExpressions.PUBLISHED
        if filters.category:
            expression &= Attr("category").eq(filters.category)
        if filters.author:
            expression &= Attr("author").eq(filters.author)
        if filters.tags:
            any_tag = Attr("tags").contains(filters.tags[0])
            for tag in filters.tags[1:]:
                any_tag |= Attr("tags").contains(tag)
            expression &= any_tag
        return expression


def _matches_search(item: dict[str, Any], search: str) -> bool:
    needle = search.casefold()
    return needle in str(item.get("title", "")).casefold() or needle in str(
        item.get("content", "")
    ).casefold()


def page_count(total: int, limit: int) -> int:
    return math.ceil(total / limit)


class PostService:
    ERROR_POST_NOT_FOUND = "Post not found"
    ERROR_SLUG_EMPTY = "slug: A slug cannot be derived from the given title"
    ERROR_SLUG_EXISTS = "slug: There is already a post with this slug"

    def __init__(self):
        self._logger = Logger(utc=True)
        self._repo = PostRepository()

    def get_posts(
        self, filters: PostFilters, page: int = 1, limit: int = 10
    ) -> tuple[list[Post], int]:
        items = self._repo.get_all_posts(FilterExpressions.build(filters))
        if filters.search:
            items = [item for item in items if _matches_search(item, filters.search)]
        items.sort(key=lambda i: i["created_at"], reverse=True)
        skip = (page - 1) * limit
        posts = [Post(**item) for item in items[skip : skip + limit]]
        self._logger.debug(
            f"Listed posts {filters=} {page=} {limit=} total={len(items)}"
        )
        return posts, len(items)

    def get_post(self, post_uuid: str) -> Post:
        item = self._repo.get_post_by_uuid(post_uuid)
        if not item:
            self._logger.warning(f"Post not found: {post_uuid=}")
            raise PostNotFoundException(self.ERROR_POST_NOT_FOUND)
        return Post(**item)

    def view_post(self, post_uuid: str) -> Post:
        item = self._repo.increment_views(post_uuid)
        if not item:
            self._logger.warning(f"Post not found: {post_uuid=}")
            raise PostNotFoundException(self.ERROR_POST_NOT_FOUND)
        return Post(**item)

    def create_post(self, create_post: CreatePost, author_id: str) -> Post:
        data = create_post.model_dump()
        slug = data["slug"] or make_slug(data["title"])
        if not slug:
            raise ValidationException(self.ERROR_SLUG_EMPTY)
        now = pendulum.now("UTC").to_iso8601_string()
        data.update(
            {
                "id": str(uuid.uuid4()),
                "author": author_id,
                "slug": slug,
                "views": 0,
                "created_at": now,
                "updated_at": now,
            }
        )
        post = Post(**data)
        if not self._repo.reserve_slug(slug, post.id):
            raise SlugAlreadyExistsException(self.ERROR_SLUG_EXISTS)
        try:
            self._repo.create_post(post.model_dump())
        except ClientError:
            self._repo.release_slug(slug)
            raise
        self._logger.info(f"Post created: {post.id=} {slug=} {author_id=}")
        return post

    def update_post(self, post_uuid: str, update_post: UpdatePost) -> Post:
        data = update_post.model_dump(exclude_none=True)
        data["updated_at"] = pendulum.now("UTC").to_iso8601_string()
        item = self._repo.update_post(post_uuid, data)
        if not item:
            self._logger.warning(f"Post not found: {post_uuid=}")
            raise PostNotFoundException(self.ERROR_POST_NOT_FOUND)
        self._logger.info(f"Post updated: {post_uuid=} fields={sorted(data)}")
        return Post(**item)

    def delete_post(self, post_uuid: str):
        item = self._repo.delete_post(post_uuid)
        if not item:
            self._logger.warning(f"Post not found: {post_uuid=}")
            raise PostNotFoundException(self.ERROR_POST_NOT_FOUND)
        self._logger.info(f"Post deleted: {post_uuid=}")
        try:
            self._repo.release_slug(item["slug"])
        except ClientError:
            self._logger.exception(
                f"Failed to release slug of deleted post {post_uuid=}"
            )
