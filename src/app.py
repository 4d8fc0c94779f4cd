"""Command line entry point for ircpush.

Pushes to the relay outside the chat client, shares config.json with the
config panel, and is handy for checking a relay setup by hand.
"""

from __future__ import annotations

import argparse
from typing import Optional

from art import tprint
from dotenv import load_dotenv

import settings
from adapters.relay_notifier import RelayNotifier
from adapters.tls_transport import TlsTransport
from core.config import PushContext, describe_config, read_config
from log_config import configure_logging

NAME = "IRCPUSH"
FONT = "tarty-1"


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


def _build_notifier(timeout: Optional[float]) -> tuple[RelayNotifier, PushContext]:
    load_dotenv()
    context = PushContext(config=read_config(settings.registry()))
    configure_logging(
        settings.logging_config(),
        settings.config_dir(),
        auth_token=context.config.auth_token,
        debug=context.config.debug,
    )
    return RelayNotifier(context, TlsTransport(timeout=timeout)), context


def _send(args: argparse.Namespace) -> None:
    notifier, _ = _build_notifier(args.timeout)
    notifier.send(args.room, args.sender, args.message)


def _clear(args: argparse.Namespace) -> None:
    notifier, _ = _build_notifier(args.timeout)
    notifier.clear()


def _show(args: argparse.Namespace) -> None:
    _print_banner()
    _, context = _build_notifier(args.timeout)
    print(f"config: {settings.CONFIG_PATH}")
    for line in describe_config(context.config):
        print(line)


def _setup() -> None:
    _print_banner()
    from frontend.app import ConfigPanelApp

    ConfigPanelApp().run()


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="ircpush")
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds to wait for the relay connection (default: block)",
    )
    subparsers = parser.add_subparsers(dest="command")

    send_parser = subparsers.add_parser("send", help="Push a message to the relay")
    send_parser.add_argument("message", help="Message text")
    send_parser.add_argument("--sender", default="ircpush", help="Sender shown on the device")
    send_parser.add_argument("--room", default="", help="Channel name, empty for a private message")

    subparsers.add_parser("clear", help="Clear pending notifications on the device")
    subparsers.add_parser("show", help="Print the effective settings")
    subparsers.add_parser("config", help="Launch the config TUI")

    args = parser.parse_args(argv)
    if args.command == "send":
        _send(args)
        return
    if args.command == "clear":
        _clear(args)
        return
    if args.command == "show":
        _show(args)
        return
    if args.command == "config":
        _setup()
        return
    parser.print_help()


if __name__ == "__main__":
    main()
