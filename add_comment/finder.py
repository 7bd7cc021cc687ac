"""Locate the comment previously posted for a message id."""

import logging

from add_comment.adapters.base import CommentPlatformAdapter
from add_comment.body import build_marker
from add_comment.models import Comment, IssueRef

logger = logging.getLogger(__name__)

COMMENTS_PER_PAGE = 100


def find_existing_comment(
    adapter: CommentPlatformAdapter,
    issue: IssueRef,
    message_id: str,
) -> Comment | None:
    """Return the first comment (in API order) whose body contains the
    marker for message_id, or None.

    Pages are fetched lazily; no further page is requested once a match is
    found. With an empty message_id nothing is fetched.
    """
    if not message_id:
        return None

    marker = build_marker(message_id)
    pages = adapter.iter_issue_comment_pages(issue.full_name, issue.number, per_page=COMMENTS_PER_PAGE)
    for comments in pages:
        for comment in comments:
            if marker in comment.body:
                logger.debug("Marker %r found in comment %d", marker, comment.id)
                return comment
    return None
