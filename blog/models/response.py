from blog.models.camel_model import CamelModel
from blog.models.post import Post


class MessageResponse(CamelModel):
    success: bool = True
    message: str


class PostResponse(CamelModel):
    success: bool = True
    data: Post


class PostMessageResponse(PostResponse):
    message: str


class Page(CamelModel):
    success: bool = True
    count: int
    total: int
    page: int
    pages: int
    data: list[Post]


class Health(CamelModel):
    status: str
    timestamp: str
    uptime: float
