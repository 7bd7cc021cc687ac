"""Shared fixtures: in-memory comment platform."""

from typing import Dict, Iterator, List

import pytest

from add_comment.adapters.base import CommentPlatformAdapter, TransportError
from add_comment.models import Comment


class FakeCommentAdapter(CommentPlatformAdapter):
    """Keeps comments per (repo, issue) in memory and records every call."""

    def __init__(self) -> None:
        self.comments: Dict[tuple[str, int], List[Comment]] = {}
        self.calls: List[tuple] = []
        self.pages_fetched = 0
        self._next_id = 1000

    def add(self, repo: str, issue_number: int, body: str) -> Comment:
        self._next_id += 1
        comment = Comment(
            id=self._next_id,
            body=body,
            html_url=f"https://github.com/{repo}/issues/{issue_number}#issuecomment-{self._next_id}",
        )
        self.comments.setdefault((repo, issue_number), []).append(comment)
        return comment

    def iter_issue_comment_pages(
        self,
        repo: str,
        issue_number: int,
        per_page: int = 100,
    ) -> Iterator[List[Comment]]:
        self.calls.append(("list", repo, issue_number, per_page))
        items = list(self.comments.get((repo, issue_number), []))
        if not items:
            self.pages_fetched += 1
            yield []
            return
        for start in range(0, len(items), per_page):
            self.pages_fetched += 1
            yield items[start : start + per_page]

    def create_comment(self, repo: str, issue_number: int, body: str) -> Comment:
        self.calls.append(("create", repo, issue_number, body))
        return self.add(repo, issue_number, body)

    def update_comment(self, repo: str, comment_id: int, body: str) -> Comment:
        self.calls.append(("update", repo, comment_id, body))
        for (r, _), comments in self.comments.items():
            if r != repo:
                continue
            for i, c in enumerate(comments):
                if c.id == comment_id:
                    comments[i] = c.model_copy(update={"body": body})
                    return comments[i]
        raise TransportError("404: Not Found")


@pytest.fixture
def fake_adapter() -> FakeCommentAdapter:
    return FakeCommentAdapter()
