"""Ambient workflow context (current repository and event payload)."""

from pydantic import BaseModel


class ActionContext(BaseModel):
    """What the triggering workflow run knows about its target.

    Built once by ``add_comment.context.load_context`` and passed to the
    resolver explicitly.
    """

    repository: str | None = None
    pull_request_number: int | None = None
    issue_number: int | None = None
