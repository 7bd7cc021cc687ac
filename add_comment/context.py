"""Load the ambient workflow context from the runner environment."""

import json
import logging
from pathlib import Path
from typing import Any, Dict

from add_comment.config import ConfigError, GitHubConfig
from add_comment.models import ActionContext

logger = logging.getLogger(__name__)


def _number_of(payload: Dict[str, Any], key: str) -> int | None:
    section = payload.get(key)
    if not isinstance(section, dict):
        return None
    number = section.get("number")
    if isinstance(number, int) and not isinstance(number, bool) and number > 0:
        return number
    return None


def context_from_payload(payload: Dict[str, Any], repository: str | None = None) -> ActionContext:
    """Pick PR and issue numbers out of an event payload."""
    return ActionContext(
        repository=repository or None,
        pull_request_number=_number_of(payload, "pull_request"),
        issue_number=_number_of(payload, "issue"),
    )


def load_event_payload(event_path: str | None) -> Dict[str, Any]:
    """Read the event JSON; missing path or file yields an empty payload."""
    if not event_path:
        return {}
    path = Path(event_path)
    if not path.is_file():
        logger.debug("Event payload %s not found, using empty context", event_path)
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigError(f"Invalid event payload {event_path}: {e}") from e
    return data if isinstance(data, dict) else {}


def load_context(config: GitHubConfig) -> ActionContext:
    """Build ActionContext from GITHUB_REPOSITORY and GITHUB_EVENT_PATH."""
    payload = load_event_payload(config.event_path)
    return context_from_payload(payload, config.repository)
