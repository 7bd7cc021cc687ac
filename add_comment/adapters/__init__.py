"""Comment platform adapters."""

from add_comment.adapters.base import CommentPlatformAdapter, TransportError
from add_comment.adapters.github import GitHubAdapter

__all__ = ["CommentPlatformAdapter", "TransportError", "GitHubAdapter"]
