"""Abstract base for comment platform adapters."""

from abc import ABC, abstractmethod
from typing import Iterator, List

from add_comment.models import Comment


class TransportError(Exception):
    """Raised when a platform API call fails (auth, not found, rate limit,
    network)."""

    pass


class CommentPlatformAdapter(ABC):
    """Abstract interface for the issue comment API of a Git hosting
    platform."""

    @abstractmethod
    def iter_issue_comment_pages(
        self,
        repo: str,
        issue_number: int,
        per_page: int = 100,
    ) -> Iterator[List[Comment]]:
        """Yield comments on an issue one page at a time, in API order.

        Each page is fetched only when the previous one has been consumed.
        """
        ...

    @abstractmethod
    def create_comment(self, repo: str, issue_number: int, body: str) -> Comment:
        """Post a comment on an issue."""
        ...

    @abstractmethod
    def update_comment(self, repo: str, comment_id: int, body: str) -> Comment:
        """Replace the body of an existing comment."""
        ...
