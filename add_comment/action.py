"""Create-or-update workflow for a message-id keyed comment."""

import logging
from typing import Callable

from add_comment.adapters.base import CommentPlatformAdapter
from add_comment.body import build_body
from add_comment.config import ActionInputs, AppConfig
from add_comment.finder import find_existing_comment
from add_comment.logging import log_header
from add_comment.models import ActionContext, IssueRef, UpsertResult
from add_comment.outputs import ActionOutputs
from add_comment.resolver import resolve_issue_ref
from add_comment.writer import CommentWriter

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "Unknown error occurred"

AdapterFactory = Callable[[str], CommentPlatformAdapter]


def upsert_comment(
    adapter: CommentPlatformAdapter,
    issue: IssueRef,
    message: str,
    message_id: str = "",
) -> UpsertResult:
    """Update the comment carrying message_id on issue, or create one.

    Without a message_id a new comment is always created.
    """
    body = build_body(message, message_id)
    writer = CommentWriter(adapter)

    existing = None
    if message_id:
        logger.info("Searching for existing comment with message-id: %s", message_id)
        existing = find_existing_comment(adapter, issue, message_id)

    if existing is not None:
        logger.info("Found existing comment (ID: %d), updating...", existing.id)
        comment = writer.update(issue, existing.id, body)
        logger.info("Comment updated successfully")
        return UpsertResult(comment=comment, updated=True)

    logger.info("Creating new comment on issue/PR #%d...", issue.number)
    comment = writer.create(issue, body)
    logger.info("Comment created successfully")
    return UpsertResult(comment=comment, created=True)


def report_result(result: UpsertResult, outputs: ActionOutputs) -> None:
    outputs.set_output("comment-id", str(result.comment.id))
    outputs.set_output("comment-created", str(result.created).lower())
    outputs.set_output("comment-updated", str(result.updated).lower())
    logger.info("Comment ID: %d", result.comment.id)
    logger.info("Comment URL: %s", result.comment.html_url)


def run(
    inputs: ActionInputs,
    context: ActionContext,
    adapter_factory: AdapterFactory,
    outputs: ActionOutputs,
    config: AppConfig | None = None,
) -> bool:
    """Run the whole action; return True on success.

    Any error aborts the run and is reported once through
    ``outputs.set_failed``; outputs are only set after a successful write.
    """
    try:
        message = inputs.require_message()
        token = inputs.require_token(config)
        issue = resolve_issue_ref(inputs, context)

        log_header(logger, issue.full_name, issue.number, inputs.message_id)

        adapter = adapter_factory(token)
        result = upsert_comment(adapter, issue, message, inputs.message_id)
        report_result(result, outputs)
    except Exception as e:
        logger.debug("Run failed", exc_info=True)
        outputs.set_failed(str(e) or UNKNOWN_ERROR)
        return False
    return True
