"""Create or update the comment on the platform."""

import logging

from add_comment.adapters.base import CommentPlatformAdapter
from add_comment.body import truncate_comment
from add_comment.models import Comment, IssueRef

logger = logging.getLogger(__name__)


class CommentWriter:
    """Sends comment bodies through an adapter.

    Every body is truncated again right before sending, whatever the caller
    did with it.
    """

    def __init__(self, adapter: CommentPlatformAdapter) -> None:
        self._adapter = adapter

    def create(self, issue: IssueRef, body: str) -> Comment:
        """Post a new comment on the issue."""
        return self._adapter.create_comment(issue.full_name, issue.number, truncate_comment(body))

    def update(self, issue: IssueRef, comment_id: int, body: str) -> Comment:
        """Replace the body of comment_id in the issue's repository."""
        return self._adapter.update_comment(issue.full_name, comment_id, truncate_comment(body))
