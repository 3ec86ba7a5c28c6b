"""Command-line front end for the content platform API.

Examples:
    content-platform summarize "Long article text..." --save-as "My article"
    content-platform generate "ideas for a blog post about tea"
    content-platform list
    content-platform status
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from typing import Sequence

from content_api.client.api_client import DEFAULT_BASE_URL, ContentAPIClient, ContentAPIError
from content_api.client.session import GENERATED_ERROR, SUMMARY_ERROR, ContentSession


def _read_input(value: str | None, file_path: str | None) -> str:
    if file_path == "-":
        return sys.stdin.read()
    if file_path:
        with open(file_path, encoding="utf-8") as handle:
            return handle.read()
    return value or ""


def _print_saved(session: ContentSession) -> None:
    if not session.saved:
        print("No saved content yet.")
        return
    for item in session.saved:
        print(f"[{item.get('id')}] {item.get('title')} ({item.get('created_at')})")
        print(f"    {item.get('summary_text')}")


def _cmd_summarize(session: ContentSession, args: argparse.Namespace) -> int:
    session.text = _read_input(args.text, args.file)
    if not session.text.strip():
        print("Nothing to summarize.", file=sys.stderr)
        return 2

    session.summarize()
    print(session.summary)
    if session.summary == SUMMARY_ERROR:
        return 1

    if args.save_as:
        session.title = args.save_as
        saved = session.save()
        print(session.alert)
        return 0 if saved else 1
    return 0


def _cmd_generate(session: ContentSession, args: argparse.Namespace) -> int:
    session.prompt = _read_input(args.prompt, args.file)
    if not session.prompt.strip():
        print("Nothing to generate from.", file=sys.stderr)
        return 2

    session.generate()
    print(session.generated)
    return 1 if session.generated == GENERATED_ERROR else 0


def _cmd_save(session: ContentSession, args: argparse.Namespace) -> int:
    session.title = args.title
    session.text = _read_input(args.text, args.file)
    session.summary = args.summary
    session.generated = args.generated or ""
    saved = session.save()
    print(session.alert)
    if saved:
        _print_saved(session)
    return 0 if saved else 1


def _cmd_list(session: ContentSession, args: argparse.Namespace) -> int:
    if not session.mount():
        print("Could not load saved content.", file=sys.stderr)
        return 1
    _print_saved(session)
    return 0


def _cmd_status(session: ContentSession, args: argparse.Namespace) -> int:
    try:
        print(json.dumps(session.client.status(), indent=2))
    except ContentAPIError as exc:
        print(f"API unavailable: {exc}", file=sys.stderr)
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="content-platform",
        description="Summarize, generate and save content through the AI Content Platform API.",
    )
    parser.add_argument(
        "--base-url",
        default=os.getenv("CONTENT_API_URL", DEFAULT_BASE_URL),
        help="API root URL (default: $CONTENT_API_URL or %(default)s)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_sum = sub.add_parser("summarize", help="Summarize text")
    p_sum.add_argument("text", nargs="?", help="Text to summarize")
    p_sum.add_argument("-f", "--file", help="Read text from a file ('-' for stdin)")
    p_sum.add_argument("--save-as", metavar="TITLE", help="Save the result under this title")
    p_sum.set_defaults(handler=_cmd_summarize)

    p_gen = sub.add_parser("generate", help="Generate related content from a prompt")
    p_gen.add_argument("prompt", nargs="?", help="Prompt text")
    p_gen.add_argument("-f", "--file", help="Read the prompt from a file ('-' for stdin)")
    p_gen.set_defaults(handler=_cmd_generate)

    p_save = sub.add_parser("save", help="Save a summary")
    p_save.add_argument("--title", required=True)
    p_save.add_argument("--text", help="Original text")
    p_save.add_argument("-f", "--file", help="Read the original text from a file ('-' for stdin)")
    p_save.add_argument("--summary", required=True)
    p_save.add_argument("--generated", help="Generated content to store alongside")
    p_save.set_defaults(handler=_cmd_save)

    p_list = sub.add_parser("list", help="List saved summaries")
    p_list.set_defaults(handler=_cmd_list)

    p_status = sub.add_parser("status", help="Show API dependency status")
    p_status.set_defaults(handler=_cmd_status)

    return parser


def main(argv: Sequence[str] | None = None, *, client: ContentAPIClient | None = None) -> int:
    args = build_parser().parse_args(argv)
    api = client or ContentAPIClient(args.base_url)
    try:
        return args.handler(ContentSession(client=api), args)
    finally:
        if client is None:
            api.close()


if __name__ == "__main__":
    sys.exit(main())
