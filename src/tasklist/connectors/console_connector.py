# src/tasklist/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..cli.commands import render_list
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def print_banner(text: str) -> None:
    """Failure banner: storage problems are shown, never raised."""
    print(f"[{_ts_local()}] [STORAGE] {text}", flush=True)


class ConsoleDialogs:
    """Modal text entry on the terminal. An empty line or Ctrl+D cancels."""

    def ask_text(
        self,
        title: str,
        message: str,
        *,
        initial: str = "",
        placeholder: str = "",
    ) -> str | None:
        print(f"== {title} ==")
        print(message)
        hint = initial or placeholder
        prompt = f"({hint}) > " if hint else "> "
        try:
            text = input(prompt).strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return None
        return text or None


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started.")
    print("[CONSOLE] Manage your tasks. Use /help for commands. Use /exit to quit.\n")
    print(render_list(state.presenter))

    def emit(text: str) -> None:
        print(f"[{_ts_local()}] {text}", flush=True)

    while True:
        try:
            user_input = input(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        if not user_input.startswith("/"):
            # Plain text is a shortcut for the add button.
            user_input = f"/add {user_input}"

        try:
            reply = command_registry.handle(state, user_input, emit=emit)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is not None:
            print(reply)

    logger.info("Console connector finished.")
