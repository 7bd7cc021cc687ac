"""GitHub API adapter."""

import logging
from typing import Any, Dict, Iterator, List

import requests

from add_comment.adapters.base import CommentPlatformAdapter, TransportError
from add_comment.models import Comment

logger = logging.getLogger(__name__)


def _comment_from_api(data: Dict[str, Any]) -> Comment:
    return Comment(
        id=data["id"],
        body=data.get("body") or "",
        html_url=data.get("html_url") or "",
    )


class GitHubAdapter(CommentPlatformAdapter):
    """GitHub REST API implementation."""

    def __init__(self, token: str, api_url: str = "https://api.github.com") -> None:
        self._api_url = api_url.rstrip("/")
        self._session = requests.Session()
        self._session.headers["Authorization"] = f"token {token}"
        self._session.headers["Accept"] = "application/vnd.github.v3+json"

    def _request(
        self,
        method: str,
        path: str,
        params: Dict[str, Any] | None = None,
        json: Dict[str, Any] | None = None,
    ) -> requests.Response:
        if path.startswith(("http://", "https://")):
            url = path
        else:
            url = f"{self._api_url}{path}" if path.startswith("/") else f"{self._api_url}/{path}"
        try:
            resp = self._session.request(method, url, params=params, json=json, timeout=30)
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}") from e
        if resp.status_code >= 400:
            msg = resp.text or resp.reason or str(resp.status_code)
            try:
                msg = resp.json().get("message", msg)
            except Exception:
                pass
            raise TransportError(f"{resp.status_code}: {msg}")
        return resp

    def iter_issue_comment_pages(
        self,
        repo: str,
        issue_number: int,
        per_page: int = 100,
    ) -> Iterator[List[Comment]]:
        path: str | None = f"/repos/{repo}/issues/{issue_number}/comments"
        params: Dict[str, Any] | None = {"per_page": per_page}
        page = 1
        while path:
            logger.debug("Fetching comments page %d for %s#%d", page, repo, issue_number)
            resp = self._request("GET", path, params=params)
            data = resp.json() or []
            yield [_comment_from_api(d) for d in data]
            # The next link already carries per_page and page
            path = ((resp.links or {}).get("next") or {}).get("url")
            params = None
            page += 1

    def create_comment(self, repo: str, issue_number: int, body: str) -> Comment:
        resp = self._request(
            "POST",
            f"/repos/{repo}/issues/{issue_number}/comments",
            json={"body": body},
        )
        return _comment_from_api(resp.json())

    def update_comment(self, repo: str, comment_id: int, body: str) -> Comment:
        resp = self._request(
            "PATCH",
            f"/repos/{repo}/issues/comments/{comment_id}",
            json={"body": body},
        )
        return _comment_from_api(resp.json())
