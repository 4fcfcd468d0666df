from aws_lambda_powertools import Logger

from blog.exceptions import AuthorizationException
from blog.models.auth import User
from blog.models.post import Post

logger = Logger(utc=True)


def can_modify(user: User, post: Post) -> bool:
    return user.id == post.author or user.is_admin


def authorize_post_owner(user: User, post: Post, action: str):
    if not can_modify(user, post):
        logger.warning(f"The {user=} is not allowed to {action} post {post.id=}")
        raise AuthorizationException(f"Not authorized to {action} this post")
