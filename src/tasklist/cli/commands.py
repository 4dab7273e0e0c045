# src/tasklist/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.presenter import TaskListPresenter
from ..core.state import AppState

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, str], str]
CommandHandler3 = Callable[[AppState, str, CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        # Handlers get the raw remainder so titles keep their inner spacing.
        rest = parts[1] if len(parts) > 1 else ""

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, rest, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, rest)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def render_list(presenter: TaskListPresenter) -> str:
    lines = [presenter.title]
    rows = presenter.rows()
    if not rows:
        lines.append("  (no tasks yet)")
    for row in rows:
        lines.append(f"{row.index + 1:>3}. {row.render()}")
    if presenter.editing:
        lines.append("  -- editing: /select <n> or /set <n> <title>, /editmode off to finish --")
    return "\n".join(lines)


def _row_index(presenter: TaskListPresenter, raw: str) -> int:
    """Console rows are 1-based; the presenter is 0-based."""
    try:
        n = int(raw)
    except ValueError:
        raise ValueError(f"Not a row number: {raw}") from None
    if n < 1 or n > presenter.row_count:
        raise ValueError(f"No task at row {n}.")
    return n - 1


def _row_and_text(rest: str) -> tuple[str, str]:
    """Split "<n> <title>" into the row token and the title, keeping inner spacing."""
    parts = rest.split(maxsplit=1)
    if not parts:
        return "", ""
    return parts[0], (parts[1].strip() if len(parts) > 1 else "")


def cmd_help(state: AppState, rest: str) -> str:
    return registry.build_help()


def cmd_list(state: AppState, rest: str) -> str:
    return render_list(state.presenter)


def cmd_status(state: AppState, rest: str) -> str:
    p = state.presenter
    db_path = getattr(state.settings, "tasks_db_path", "?")
    return (
        "Status:\n"
        f"  Tasks: {p.row_count}\n"
        f"  Editing mode: {'ON' if p.editing else 'OFF'}\n"
        f"  Storage: {db_path}"
    )


def cmd_add(state: AppState, rest: str) -> str:
    """
    /add          -> ask for a title
    /add <title>  -> add directly
    """
    p = state.presenter
    if not p.add_enabled:
        return "Adding is disabled while editing. Use /editmode off first."
    p.add_task(rest.strip() or None)
    return render_list(p)


def cmd_edit(state: AppState, rest: str) -> str:
    """
    /edit <n>          -> ask for a new title
    /edit <n> <title>  -> rename directly
    """
    row, text = _row_and_text(rest)
    if not row:
        return "Usage: /edit <n> [new title]"
    p = state.presenter
    try:
        index = _row_index(p, row)
    except ValueError as e:
        return str(e)
    p.edit_row(index, text or None)
    return render_list(p)


def cmd_delete(state: AppState, rest: str) -> str:
    row, _ = _row_and_text(rest)
    if not row:
        return "Usage: /delete <n>"
    p = state.presenter
    try:
        index = _row_index(p, row)
    except ValueError as e:
        return str(e)
    p.delete_row(index)
    return render_list(p)


def cmd_editmode(state: AppState, rest: str) -> str:
    """
    /editmode      -> toggle
    /editmode on   -> enable
    /editmode off  -> disable
    """
    p = state.presenter
    arg = rest.strip().lower()
    if not arg:
        p.set_editing(not p.editing)
        return render_list(p)

    if arg in ("on", "1", "true", "yes"):
        p.set_editing(True)
        return render_list(p)
    if arg in ("off", "0", "false", "no"):
        p.set_editing(False)
        return render_list(p)
    return "Usage: /editmode on or /editmode off."


def cmd_select(state: AppState, rest: str) -> str:
    p = state.presenter
    if not p.editing:
        return "Row selection only works in editing mode (/editmode on)."
    row, _ = _row_and_text(rest)
    if not row:
        return "Usage: /select <n>"
    try:
        index = _row_index(p, row)
    except ValueError as e:
        return str(e)
    p.select_row(index)
    return render_list(p)


def cmd_set(state: AppState, rest: str, emit: CommandEmitter | None = None) -> str:
    """Inline edit of a row's text field; the command line is the return key."""
    p = state.presenter
    if not p.editing:
        return "Inline editing only works in editing mode (/editmode on)."
    row, text = _row_and_text(rest)
    if not row or not text:
        return "Usage: /set <n> <new title>"
    try:
        index = _row_index(p, row)
    except ValueError as e:
        return str(e)
    if not p.commit_inline_edit(index, text):
        if emit:
            emit("Nothing changed.")
    return render_list(p)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add [title].", aliases=["new"])
registry.register("edit", cmd_edit, help_text="Rename a task: /edit <n> [title].")
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <n>.", aliases=["del", "rm"])
registry.register(
    "editmode", cmd_editmode, help_text="Toggle editing mode: /editmode [on|off]."
)
registry.register(
    "select", cmd_select, help_text="Editing mode: open the edit dialog for row <n>."
)
registry.register(
    "set", cmd_set, help_text="Editing mode: commit inline text for row <n>: /set <n> <title>."
)
registry.register("status", cmd_status, help_text="Show task count, editing mode and storage path.")
