"""Create or update a single issue/PR comment keyed by a message id."""

VERSION = "1.0.0"
ACTION_NAME = "add-comment"

__all__ = ["ACTION_NAME", "VERSION"]
