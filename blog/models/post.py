import re

from pydantic import conint, constr
from slugify import slugify

from blog.models.camel_model import CamelModel

CONTENT_MAX_LENGTH = 10_000
CONTENT_MIN_LENGTH = 10
SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"
TITLE_MAX_LENGTH = 200
TITLE_MIN_LENGTH = 5

SLUG_DROPPED_CHARACTERS = re.compile(r"[^\w\s-]|_")


def make_slug(title: str) -> str:
    return slugify(SLUG_DROPPED_CHARACTERS.sub("", title), lowercase=True)


class Post(CamelModel):
    id: str
    title: constr(
        strip_whitespace=True, min_length=TITLE_MIN_LENGTH, max_length=TITLE_MAX_LENGTH
    )
    content: constr(min_length=CONTENT_MIN_LENGTH, max_length=CONTENT_MAX_LENGTH)
    author: str
    category: str
    slug: constr(pattern=SLUG_PATTERN)
    tags: list[str] = []
    is_published: bool = True
    views: conint(ge=0) = 0
    excerpt: str | None = None
    featured_image: str | None = None
    created_at: str
    updated_at: str
