"""Comment body composition: message-id marker and size limit.

The marker is an HTML comment on the first line, invisible in rendered
markdown, which later runs search for to find "their" comment.
"""

# GitHub rejects comments over 64 KiB; stay under 60 KiB of UTF-8
GITHUB_COMMENT_MAX_SIZE = 61440
TRUNCATION_NOTICE = "\n\n[Comment was truncated due to GitHub's size limit]"
SHRINK_FACTOR = 0.9

MARKER_PREFIX = "<!-- add-comment:"
MARKER_SUFFIX = " -->"


def _encoded_size(text: str) -> int:
    return len(text.encode("utf-8"))


def build_marker(message_id: str) -> str:
    """Return the literal marker embedded in bodies for this message id."""
    return f"{MARKER_PREFIX}{message_id}{MARKER_SUFFIX}"


def add_comment_header(message_id: str, message: str) -> str:
    """Prefix message with the marker and a blank line; no-op without an id."""
    if not message_id:
        return message
    return f"{build_marker(message_id)}\n\n{message}"


def truncate_comment(body: str, max_size: int = GITHUB_COMMENT_MAX_SIZE) -> str:
    """Fit body into max_size UTF-8 bytes, keeping its start.

    An oversized body is cut by 10% of its characters at a time until it
    fits together with TRUNCATION_NOTICE, which is then appended.
    """
    if _encoded_size(body) <= max_size:
        return body

    truncated = body
    while truncated and _encoded_size(truncated + TRUNCATION_NOTICE) > max_size:
        truncated = truncated[: int(len(truncated) * SHRINK_FACTOR)]
    return truncated + TRUNCATION_NOTICE


def build_body(message: str, message_id: str = "") -> str:
    """Compose the final comment body for message and optional message id."""
    return truncate_comment(add_comment_header(message_id, message))
