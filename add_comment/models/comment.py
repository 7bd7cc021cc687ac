"""Comment on an issue or PR."""

from pydantic import BaseModel


class Comment(BaseModel):
    """Comment on an issue or PR, as confirmed by the platform."""

    id: int
    body: str = ""
    html_url: str = ""
