"""Resolve the target issue/PR and repository from inputs and context."""

from add_comment.config import ActionInputs, ConfigError
from add_comment.models import ActionContext, IssueRef

ISSUE_NUMBER_MISSING = (
    "Could not determine issue/PR number. Please provide issue-number or pr-number input, "
    "or run this action in a pull_request or issue context."
)


def _parse_number(name: str, value: str) -> int:
    try:
        number = int(value.strip())
    except ValueError:
        raise ConfigError(f"Invalid {name}: {value!r}. Expected a positive integer") from None
    if number <= 0:
        raise ConfigError(f"Invalid {name}: {value!r}. Expected a positive integer")
    return number


def resolve_issue_number(inputs: ActionInputs, context: ActionContext) -> int:
    """First of: issue-number input, pr-number input, PR context, issue
    context."""
    if inputs.issue_number:
        return _parse_number("issue-number", inputs.issue_number)
    if inputs.pr_number:
        return _parse_number("pr-number", inputs.pr_number)
    if context.pull_request_number:
        return context.pull_request_number
    if context.issue_number:
        return context.issue_number
    raise ConfigError(ISSUE_NUMBER_MISSING)


def resolve_repository(inputs: ActionInputs, context: ActionContext) -> tuple[str, str]:
    """Split the repository input (or GITHUB_REPOSITORY) into owner and
    repo."""
    repository = inputs.repository or context.repository or ""
    if not repository:
        raise ConfigError("Repository not specified and GITHUB_REPOSITORY not set")
    parts = repository.split("/")
    if len(parts) != 2 or not all(p.strip() for p in parts):
        raise ConfigError(f"Invalid repository format: {repository}. Expected owner/repo")
    owner, repo = (p.strip() for p in parts)
    return owner, repo


def resolve_issue_ref(inputs: ActionInputs, context: ActionContext) -> IssueRef:
    # Issue number is checked before the repository
    number = resolve_issue_number(inputs, context)
    owner, repo = resolve_repository(inputs, context)
    return IssueRef(owner=owner, repo=repo, number=number)
