"""Data models for the upsert target, comments and run context (Pydantic)."""

from add_comment.models.comment import Comment
from add_comment.models.context import ActionContext
from add_comment.models.issue_ref import IssueRef
from add_comment.models.upsert_result import UpsertResult

__all__ = ["ActionContext", "Comment", "IssueRef", "UpsertResult"]
