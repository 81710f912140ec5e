"""
Docubot CLI: talk to a Docubot deployment configured through DOCUBOT_*
environment variables or a .env file.

Usage examples:
  docubot send "I need an NDA" --thread t1 --sender u1
  docubot url --thread t1 --user u1 --expires 3600
  docubot download --thread t1 --user u1 --out nda.pdf
  docubot preview-doc --document doc.json --variables vars.json --out preview.pdf
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

import requests

from docubot.api.client import ApiClient
from docubot.data.models.document import Document
from docubot.errors import DocubotConfigError, DocubotError


def _load_json(path: str) -> dict:
    with open(path, encoding="utf-8") as fh:
        try:
            data = json.load(fh)
        except ValueError as e:
            raise DocubotError(f"{path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise DocubotError(f"{path} must contain a JSON object")
    return data


def _cmd_send(client: ApiClient, args: argparse.Namespace) -> None:
    resp = client.send_message(args.message, args.thread, args.sender, tree_id=args.tree)
    for message in resp.data.messages:
        print(message)
    state = "complete" if resp.data.complete else "in progress"
    doc = " (document ready)" if resp.data.hasDocument else ""
    print(f"-- conversation {state}{doc}", file=sys.stderr)


def _cmd_variables(client: ApiClient, args: argparse.Namespace) -> None:
    resp = client.get_variables(args.thread, args.user)
    print(json.dumps(resp.data, indent=2, sort_keys=True))


def _cmd_url(client: ApiClient, args: argparse.Namespace) -> None:
    resp = client.get_docubot_doc_url(args.thread, args.user, args.expires)
    print(resp.url)


def _cmd_download(client: ApiClient, args: argparse.Namespace) -> None:
    written = client.get_docubot_doc(args.thread, args.user).save(args.out)
    logging.info(f"Wrote {written} bytes to {args.out}")


def _cmd_preview_doc(client: ApiClient, args: argparse.Namespace) -> None:
    try:
        document = Document.from_dict(_load_json(args.document))
    except ValueError as e:
        raise DocubotError(f"{args.document} is not a valid document: {e}") from e
    variables = _load_json(args.variables) if args.variables else {}
    written = client.get_preview_doc(variables, document).save(args.out)
    logging.info(f"Wrote {written} bytes to {args.out}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="docubot", description="Docubot API client")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--env-file", default=None, help="Path to a .env file (default: search from cwd)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_send = sub.add_parser("send", help="Send a message to a conversation")
    p_send.add_argument("message", help="Message text")
    p_send.add_argument("--thread", required=True, help="Conversation thread id")
    p_send.add_argument("--sender", required=True, help="Sender (user) id")
    p_send.add_argument("--tree", default=None, help="Document tree id to start from")
    p_send.set_defaults(func=_cmd_send)

    p_vars = sub.add_parser("variables", help="Print the variables collected in a conversation")
    p_vars.add_argument("--thread", required=True)
    p_vars.add_argument("--user", required=True)
    p_vars.set_defaults(func=_cmd_variables)

    p_url = sub.add_parser("url", help="Print a time-limited download URL")
    p_url.add_argument("--thread", required=True)
    p_url.add_argument("--user", required=True)
    p_url.add_argument("--expires", type=float, default=3600, help="URL lifetime in seconds (default: 3600)")
    p_url.set_defaults(func=_cmd_url)

    p_dl = sub.add_parser("download", help="Download a conversation's document")
    p_dl.add_argument("--thread", required=True)
    p_dl.add_argument("--user", required=True)
    p_dl.add_argument("--out", required=True, help="Output file path")
    p_dl.set_defaults(func=_cmd_download)

    p_prev = sub.add_parser("preview-doc", help="Render a document template without saving it")
    p_prev.add_argument("--document", required=True, help="JSON file holding the document template")
    p_prev.add_argument("--variables", default=None, help="JSON file holding the variable mapping")
    p_prev.add_argument("--out", required=True, help="Output file path")
    p_prev.set_defaults(func=_cmd_preview_doc)

    return parser


def main(argv: list[str] | None = None, client: ApiClient | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if client is None:
        try:
            client = ApiClient.from_env(args.env_file)
        except DocubotConfigError as e:
            print(f"Configuration error: {e.message}", file=sys.stderr)
            return 2

    try:
        args.func(client, args)
    except (DocubotError, requests.RequestException, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
