"""
Command-line access to the Slack service.

Every command prints the JSON payload on success. Failures print
``{"error": ...}`` and exit with status 1; bad configuration exits with 2.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from slack_client.config import ConfigurationError, SlackSettings
from slack_client.http import ApiHttpError, SlackApiError
from slack_client.logging_utils import configure_logging
from slack_client.models import Result
from slack_client.services import SlackService, build_service


def json_output(data: Any) -> None:
    indent = 2 if sys.stdout.isatty() else None
    print(json.dumps(data, indent=indent, default=str))


def error_payload(error: Exception) -> dict[str, Any]:
    payload: dict[str, Any] = {"error": str(error), "type": type(error).__name__}
    if isinstance(error, SlackApiError):
        payload["error"] = error.error
    elif isinstance(error, ApiHttpError):
        payload["status"] = error.status_code
    return payload


def emit(result: Result) -> int:
    error, value = result
    if error is not None:
        json_output(error_payload(error))
        return 1
    json_output(value)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="slack-client", description="Call the Slack Web API")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("channels", help="List every conversation visible to the bot")
    subparsers.add_parser("members", help="List every workspace member")

    user_info = subparsers.add_parser("user-info", help="Show a user")
    user_info.add_argument("user")

    bot_info = subparsers.add_parser("bot-info", help="Show a bot")
    bot_info.add_argument("bot")

    permalink = subparsers.add_parser("permalink", help="Get a message permalink")
    permalink.add_argument("channel")
    permalink.add_argument("ts", help="Message timestamp")

    post = subparsers.add_parser("post", help="Post a message")
    post.add_argument("channel")
    post.add_argument("text")
    post.add_argument("--no-mrkdwn", action="store_true", help="Send text without markdown formatting")

    open_dm = subparsers.add_parser("open-dm", help="Open a direct message channel")
    open_dm.add_argument("user")

    share = subparsers.add_parser("share-file", help="Make a file public (needs SLACK_USER_TOKEN)")
    share.add_argument("file")

    return parser


def dispatch(service: SlackService, args: argparse.Namespace) -> Result:
    if args.command == "channels":
        return service.get_channels()
    if args.command == "members":
        return service.get_members()
    if args.command == "user-info":
        return service.user_info(args.user)
    if args.command == "bot-info":
        return service.get_bot_info(args.bot)
    if args.command == "permalink":
        return service.get_permalink(args.channel, args.ts)
    if args.command == "post":
        return service.post_message(args.channel, args.text, mrkdwn=not args.no_mrkdwn)
    if args.command == "open-dm":
        return service.open_direct_message(args.user)
    if args.command == "share-file":
        return service.file_public_url(args.file)
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = SlackSettings.from_env()
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    configure_logging(settings.log_level)
    with build_service(settings) as service:
        return emit(dispatch(service, args))


if __name__ == "__main__":
    sys.exit(main())
