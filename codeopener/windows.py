"""Locating editor files and managing Start Menu shortcuts on Windows."""

from __future__ import annotations

import os
import struct
import uuid
from collections.abc import Iterator
from dataclasses import dataclass

SHORTCUTS_FOLDER = "CodeOpener"
SHORTCUT_EXTENSION = ".lnk"

_EDITOR_DATA_DIRS = {
    "codium": "VSCodium",
    "vscodium": "VSCodium",
    "code": "Code",
    "vscode": "Code",
    "cursor": "Cursor",
}

_EDITOR_EXECUTABLES = {
    "codium": ("PROGRAMFILES", ("VSCodium", "VSCodium.exe")),
    "vscodium": ("PROGRAMFILES", ("VSCodium", "VSCodium.exe")),
    "code": ("LOCALAPPDATA", ("Programs", "Microsoft VS Code", "Code.exe")),
    "vscode": ("LOCALAPPDATA", ("Programs", "Microsoft VS Code", "Code.exe")),
    "cursor": ("LOCALAPPDATA", ("Programs", "cursor", "Cursor.exe")),
}

# Shell link binary format constants.
_HEADER_SIZE = 0x4C
_LINK_CLSID = uuid.UUID("00021401-0000-0000-c000-000000000046").bytes_le
_HAS_LINK_INFO = 0x02
_HAS_NAME = 0x04
_HAS_ARGUMENTS = 0x20
_IS_UNICODE = 0x80
_SW_SHOWNORMAL = 1
_DRIVE_FIXED = 3
_LINK_INFO_HEADER_SIZE = 0x24
_VOLUME_ID_AND_LOCAL_BASE_PATH = 0x01


class ShortcutError(Exception):
    """A required folder or file is missing or cannot be created."""


@dataclass(frozen=True)
class Link:
    """An existing shortcut file and its label."""

    path: str
    label: str


def _env(name: str) -> str:
    return os.environ.get(name, "")


def _ext(path: str) -> str:
    base = os.path.basename(path)
    dot = base.rfind(".")
    return base[dot:] if dot >= 0 else ""


def get_shortcuts_path() -> str:
    """Return the shortcut folder in the Start Menu, creating it if needed."""
    path = os.path.join(_env("APPDATA"), "Microsoft", "Windows", "Start Menu", "Programs")
    if not os.path.exists(path):
        raise ShortcutError(f"Folder: {path} does not exist.")

    path = os.path.join(path, SHORTCUTS_FOLDER)
    if not os.path.exists(path):
        try:
            os.makedirs(path, exist_ok=True)
        except OSError as err:
            raise ShortcutError(f"Failed to create the directory {path}: {err}") from err
    return path


def get_editor_path(editor: str) -> str:
    """Return the editor's application data folder."""
    folder = _EDITOR_DATA_DIRS.get(editor.lower())
    path = os.path.join(_env("APPDATA"), folder) if folder else ""
    if not os.path.exists(path):
        raise ShortcutError(f"Folder: {path} does not exist.")
    return path


def get_editor_executable_path(editor: str) -> str:
    """Return the path of the editor's executable."""
    location = _EDITOR_EXECUTABLES.get(editor.lower())
    path = os.path.join(_env(location[0]), *location[1]) if location else ""
    if not os.path.exists(path):
        raise ShortcutError(f"Folder: {path} does not exist.")
    return path


def get_sqlite_database_path(editor: str) -> str:
    """Return the path of the editor's global state database."""
    path = os.path.join(get_editor_path(editor), "User", "globalStorage", "state.vscdb")
    if not os.path.exists(path):
        raise ShortcutError(f"File: {path} does not exist.")
    return path


def _walk(path: str) -> Iterator[str]:
    yield path
    if os.path.isdir(path) and not os.path.islink(path):
        try:
            names = sorted(os.listdir(path))
        except OSError:
            return
        for name in names:
            yield from _walk(os.path.join(path, name))


def get_existing_shortcuts() -> list[Link]:
    """List every shortcut below the shortcut folder, in walk order."""
    root = get_shortcuts_path()
    return [
        Link(path=path, label=os.path.basename(path)[: -len(SHORTCUT_EXTENSION)])
        for path in _walk(root)
        if _ext(path) == SHORTCUT_EXTENSION
    ]


def create_shortcut(target: str, link: str, name: str) -> None:
    """Create (or replace) a shortcut that opens the folder ``link`` in ``target``."""
    shortcut = os.path.join(get_shortcuts_path(), name + SHORTCUT_EXTENSION)
    if os.path.lexists(shortcut):
        remove_shortcut(name)
    create_windows_shortcut(
        shortcut,
        target,
        "--folder-uri " + link,
        "Shortcut for project " + name,
    )


def _string_data(value: str) -> bytes:
    encoded = value.encode("utf-16-le")
    count = len(encoded) // 2
    if count > 0xFFFF:
        raise ValueError("shortcut string is too long")
    return struct.pack("<H", count) + encoded


def _link_info(target_path: str) -> bytes:
    volume_id = struct.pack("<IIII", 17, _DRIVE_FIXED, 0, 0x10) + b"\x00"
    local_base = target_path.encode("ascii", "replace") + b"\x00"
    suffix = b"\x00"
    local_base_unicode = target_path.encode("utf-16-le") + b"\x00\x00"
    suffix_unicode = b"\x00\x00"

    volume_offset = _LINK_INFO_HEADER_SIZE
    local_base_offset = volume_offset + len(volume_id)
    suffix_offset = local_base_offset + len(local_base)
    local_base_unicode_offset = suffix_offset + len(suffix)
    suffix_unicode_offset = local_base_unicode_offset + len(local_base_unicode)
    total = suffix_unicode_offset + len(suffix_unicode)

    header = struct.pack(
        "<IIIIIIIII",
        total,
        _LINK_INFO_HEADER_SIZE,
        _VOLUME_ID_AND_LOCAL_BASE_PATH,
        volume_offset,
        local_base_offset,
        0,
        suffix_offset,
        local_base_unicode_offset,
        suffix_unicode_offset,
    )
    return header + volume_id + local_base + suffix + local_base_unicode + suffix_unicode


def create_windows_shortcut(shortcut: str, target_path: str, arguments: str, description: str) -> None:
    """Write a shell link file pointing at ``target_path`` with the given arguments."""
    flags = _HAS_LINK_INFO | _HAS_NAME | _HAS_ARGUMENTS | _IS_UNICODE
    header = struct.pack(
        "<I16sIIQQQIiIHHII",
        _HEADER_SIZE,
        _LINK_CLSID,
        flags,
        0,
        0,
        0,
        0,
        0,
        0,
        _SW_SHOWNORMAL,
        0,
        0,
        0,
        0,
    )
    content = (
        header
        + _link_info(target_path)
        + _string_data(description)
        + _string_data(arguments)
        + b"\x00\x00\x00\x00"
    )
    with open(shortcut, "wb") as handle:
        handle.write(content)


def remove_shortcut(name: str) -> None:
    """Delete the named shortcut from the shortcut folder."""
    os.remove(os.path.join(get_shortcuts_path(), name + SHORTCUT_EXTENSION))