from pydantic import ConfigDict, constr

from blog.models.camel_model import CamelModel
from blog.models.post import (
    CONTENT_MAX_LENGTH,
    CONTENT_MIN_LENGTH,
    SLUG_PATTERN,
    TITLE_MAX_LENGTH,
    TITLE_MIN_LENGTH,
)

Title = constr(
    strip_whitespace=True, min_length=TITLE_MIN_LENGTH, max_length=TITLE_MAX_LENGTH
)
Content = constr(min_length=CONTENT_MIN_LENGTH, max_length=CONTENT_MAX_LENGTH)
Tag = constr(strip_whitespace=True, min_length=1)


class CreatePost(CamelModel):
    title: Title
    content: Content
    category: constr(strip_whitespace=True, min_length=1)
    slug: constr(pattern=SLUG_PATTERN) | None = None
    tags: list[Tag] = []
    is_published: bool = True
    excerpt: str | None = None
    featured_image: str | None = None

    model_config = ConfigDict(extra="ignore")


class UpdatePost(CamelModel):
    title: Title | None = None
    content: Content | None = None
    category: constr(strip_whitespace=True, min_length=1) | None = None
    tags: list[Tag] | None = None
    is_published: bool | None = None
    excerpt: str | None = None
    featured_image: str | None = None

    model_config = ConfigDict(extra="ignore")
