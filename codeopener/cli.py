"""Command line entry point for the project shortcut picker."""

from __future__ import annotations

import sqlite3
import sys

from codeopener import ui, vscode, windows


def main(argv=None) -> int:
    """Pick recently opened projects of an editor and manage their shortcuts."""
    args = sys.argv[1:] if argv is None else list(argv)
    if sys.platform != "win32":
        raise SystemExit("This OS is not supported.")
    if not args:
        raise SystemExit("An argument is missing: editor (e.g. 'vscode', 'vscodium', 'cursor').")

    editor = args[0]
    try:
        executable = windows.get_editor_executable_path(editor)
        history = vscode.get_recently_opened_projects(windows.get_sqlite_database_path(editor))
        shortcuts = windows.get_existing_shortcuts()
        projects = vscode.parse_recently_opened_projects(history)
    except (windows.ShortcutError, LookupError, ValueError, OSError, sqlite3.Error) as err:
        raise SystemExit(str(err)) from err

    ui.loop(ui.init_model(executable, projects, shortcuts))
    return 0