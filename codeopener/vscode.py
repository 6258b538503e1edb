"""Reading the recently opened projects of a VS Code style editor."""

from __future__ import annotations

import json
import re
import sqlite3
from contextlib import closing
from dataclasses import dataclass
from urllib.parse import unquote_plus

HISTORY_KEY = "history.recentlyOpenedPathsList"
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


@dataclass(frozen=True)
class Entry:
    """A recently opened folder and the label shown for it."""

    folder: str
    label: str


def get_recently_opened_projects(sql_file: str) -> str:
    """Return the raw JSON history stored in the editor's state database."""
    with closing(sqlite3.connect(sql_file)) as connection:
        for key, value, *_ in connection.execute("SELECT * FROM ItemTable"):
            if key == HISTORY_KEY:
                return value.decode("utf-8") if isinstance(value, bytes) else str(value)
    raise LookupError("could not find any recently opened projects")


def _base(path: str) -> str:
    """Last element of a path, treating both slash kinds as separators."""
    stripped = path.rstrip("/\\")
    if not stripped:
        return "\\" if path else "."
    return re.split(r"[/\\]", stripped)[-1]


def parse_recently_opened_projects(history: str) -> list[Entry]:
    """Extract the folder entries from the editor's history JSON."""
    data = json.loads(history)
    if not isinstance(data, dict):
        raise ValueError("history must be a JSON object")
    return [
        Entry(folder=folder, label=_base(folder))
        for item in data.get("entries") or []
        if (folder := (item or {}).get("folderUri") or "")
    ]


def display_folder_path(path: str) -> str:
    """Decode a folder URI and drop its scheme characters for display."""
    if _BAD_ESCAPE.search(path):
        raise ValueError(f"invalid URL escape in {path!r}")
    decoded = unquote_plus(path)
    for symbol in ("vscode-remote://", "file://"):
        decoded = decoded.lstrip(symbol)
    return decoded