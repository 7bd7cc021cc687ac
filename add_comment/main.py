"""add-comment entry point.

Runs as a GitHub Action step (inputs from INPUT_* env) or from the command
line (flags override env). Usage: add-comment [--message TEXT] [--message-id ID] ...
"""

import argparse
import sys
from pathlib import Path

from add_comment import ACTION_NAME, VERSION
from add_comment.action import UNKNOWN_ERROR, run
from add_comment.adapters import GitHubAdapter
from add_comment.config import ConfigError, load_config, load_inputs
from add_comment.context import load_context
from add_comment.logging import ActionLogging
from add_comment.outputs import ActionOutputs
from add_comment.resolver import resolve_issue_ref


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI flags; every flag is optional and falls back to INPUT_*."""
    argv = argv if argv is not None else sys.argv[1:]
    parser = argparse.ArgumentParser(
        prog=ACTION_NAME,
        description="Create or update a single issue/PR comment identified by a message id",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("--message", "-m", help="Comment text")
    parser.add_argument("--message-file", type=Path, help="Read comment text from file")
    parser.add_argument("--message-id", help="Identifier embedded in the comment for later updates")
    parser.add_argument("--repository", help="Target repository owner/repo (default: GITHUB_REPOSITORY)")
    parser.add_argument("--issue-number", help="Target issue number")
    parser.add_argument("--pr-number", help="Target pull request number (alias of --issue-number)")
    parser.add_argument("--token", help="GitHub token (default: INPUT_TOKEN, GITHUB_TOKEN)")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to optional YAML config file",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only resolve inputs and target, then exit",
    )
    return parser.parse_args(argv)


def _read_message(args: argparse.Namespace) -> str | None:
    if args.message_file is None:
        return args.message
    try:
        return args.message_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read message file {args.message_file}: {e}") from e


def main(argv: list[str] | None = None) -> int:
    """Entry point: load config and inputs, run the action.

    Failures before the run are reported through the same ``::error::``
    channel as failures inside it.
    """
    args = parse_args(argv)
    outputs = ActionOutputs()

    try:
        config = load_config(args.config)
        ActionLogging(config.logging).setup()
        outputs = ActionOutputs(config.github.output)

        inputs = load_inputs(
            overrides={
                "message": _read_message(args),
                "message_id": args.message_id,
                "repository": args.repository,
                "issue_number": args.issue_number,
                "pr_number": args.pr_number,
                "token": args.token,
            }
        )
        context = load_context(config.github)

        if args.check:
            issue = resolve_issue_ref(inputs, context)
            print("Config OK:", f"{issue.full_name}#{issue.number}", inputs.message_id or "(no message-id)")
            return 0
    except Exception as e:
        outputs.set_failed(str(e) or UNKNOWN_ERROR)
        return 1

    ok = run(
        inputs,
        context,
        lambda token: GitHubAdapter(token=token, api_url=config.github.api_url),
        outputs,
        config=config,
    )
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
