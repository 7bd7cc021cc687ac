"""Tests for add_comment.body (marker, header, truncation)."""

from add_comment.body import (
    GITHUB_COMMENT_MAX_SIZE,
    TRUNCATION_NOTICE,
    add_comment_header,
    build_body,
    build_marker,
    truncate_comment,
)


def _size(text: str) -> int:
    return len(text.encode("utf-8"))


class TestMarker:
    """build_marker and add_comment_header."""

    def test_marker_format(self) -> None:
        """Marker is an HTML comment naming the message id."""
        assert build_marker("test-id") == "<!-- add-comment:test-id -->"

    def test_marker_is_reproducible(self) -> None:
        """Same id always gives the same marker."""
        assert build_marker("deploy/preview") == build_marker("deploy/preview")

    def test_header_without_id_returns_message(self) -> None:
        """Empty message id leaves the message untouched."""
        assert add_comment_header("", "Hello") == "Hello"

    def test_header_with_id_prefixes_marker_and_blank_line(self) -> None:
        """Marker, blank line, then the message."""
        assert add_comment_header("test-id", "Hello") == "<!-- add-comment:test-id -->\n\nHello"


class TestTruncateComment:
    """truncate_comment keeps bodies under GITHUB_COMMENT_MAX_SIZE bytes."""

    def test_constant(self) -> None:
        assert GITHUB_COMMENT_MAX_SIZE == 61440
        assert TRUNCATION_NOTICE == "\n\n[Comment was truncated due to GitHub's size limit]"

    def test_small_body_unchanged(self) -> None:
        assert truncate_comment("short") == "short"

    def test_body_at_exact_limit_unchanged(self) -> None:
        """Limit is inclusive."""
        body = "a" * GITHUB_COMMENT_MAX_SIZE
        assert truncate_comment(body) == body

    def test_body_one_byte_over_is_truncated(self) -> None:
        body = "a" * (GITHUB_COMMENT_MAX_SIZE + 1)
        result = truncate_comment(body)
        assert result.endswith(TRUNCATION_NOTICE)
        assert _size(result) <= GITHUB_COMMENT_MAX_SIZE

    def test_large_body_keeps_prefix(self) -> None:
        """Truncation drops from the tail only."""
        body = "HEAD" + "x" * 200000
        result = truncate_comment(body)
        assert result.startswith("HEAD")
        assert _size(result) <= GITHUB_COMMENT_MAX_SIZE
        assert result[: -len(TRUNCATION_NOTICE)] == body[: len(result) - len(TRUNCATION_NOTICE)]

    def test_multibyte_body_measured_in_bytes(self) -> None:
        """Under the limit in characters but over it in UTF-8 bytes."""
        body = "é" * 40000
        assert len(body) < GITHUB_COMMENT_MAX_SIZE
        result = truncate_comment(body)
        assert result.endswith(TRUNCATION_NOTICE)
        assert _size(result) <= GITHUB_COMMENT_MAX_SIZE

    def test_custom_limit(self) -> None:
        result = truncate_comment("b" * 500, max_size=200)
        assert result.endswith(TRUNCATION_NOTICE)
        assert _size(result) <= 200


class TestBuildBody:
    """build_body composes header and truncation."""

    def test_without_id(self) -> None:
        assert build_body("Test comment message") == "Test comment message"

    def test_with_id(self) -> None:
        assert build_body("Test comment message", "test-id") == (
            "<!-- add-comment:test-id -->\n\nTest comment message"
        )

    def test_oversized_keeps_marker(self) -> None:
        result = build_body("z" * 100000, "big")
        assert result.startswith("<!-- add-comment:big -->\n\n")
        assert result.endswith(TRUNCATION_NOTICE)
        assert _size(result) <= GITHUB_COMMENT_MAX_SIZE
