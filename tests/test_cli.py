import sqlite3
import sys

import pytest

from codeopener.cli import main


@pytest.fixture
def windows_env(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "platform", "win32")
    roaming = tmp_path / "roaming"
    local = tmp_path / "local"
    roaming.mkdir()
    local.mkdir()
    monkeypatch.setenv("APPDATA", str(roaming))
    monkeypatch.setenv("LOCALAPPDATA", str(local))
    monkeypatch.setenv("PROGRAMFILES", str(tmp_path / "programs"))
    return tmp_path


def install_vscode(root):
    exe = root / "local" / "Programs" / "Microsoft VS Code" / "Code.exe"
    exe.parent.mkdir(parents=True)
    exe.write_bytes(b"")
    return exe


def make_database(root, rows):
    db = root / "roaming" / "Code" / "User" / "globalStorage" / "state.vscdb"
    db.parent.mkdir(parents=True)
    connection = sqlite3.connect(str(db))
    try:
        connection.execute("CREATE TABLE ItemTable (key TEXT, value TEXT)")
        connection.executemany("INSERT INTO ItemTable VALUES (?, ?)", rows)
        connection.commit()
    finally:
        connection.close()
    return db


def make_start_menu(root):
    folder = root / "roaming" / "Microsoft" / "Windows" / "Start Menu" / "Programs"
    folder.mkdir(parents=True)
    return folder


def test_rejects_other_platforms(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    with pytest.raises(SystemExit) as excinfo:
        main(["vscode"])
    assert str(excinfo.value) == "This OS is not supported."


def test_requires_editor_argument(windows_env):
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert str(excinfo.value) == (
        "An argument is missing: editor (e.g. 'vscode', 'vscodium', 'cursor')."
    )


def test_missing_executable(windows_env):
    with pytest.raises(SystemExit) as excinfo:
        main(["vscode"])
    message = str(excinfo.value)
    assert message.startswith("Folder: ")
    assert message.endswith("Code.exe does not exist.")


def test_missing_database(windows_env):
    install_vscode(windows_env)
    (windows_env / "roaming" / "Code").mkdir()
    with pytest.raises(SystemExit) as excinfo:
        main(["VSCode"])
    message = str(excinfo.value)
    assert message.startswith("File: ")
    assert message.endswith("state.vscdb does not exist.")


def test_missing_history(windows_env):
    install_vscode(windows_env)
    make_database(windows_env, [("other.key", "{}")])
    with pytest.raises(SystemExit) as excinfo:
        main(["code"])
    assert str(excinfo.value) == "could not find any recently opened projects"


def test_missing_start_menu(windows_env):
    install_vscode(windows_env)
    make_database(windows_env, [("history.recentlyOpenedPathsList", '{"entries": []}')])
    with pytest.raises(SystemExit) as excinfo:
        main(["code"])
    message = str(excinfo.value)
    assert "Start Menu" in message
    assert message.endswith("does not exist.")


def test_invalid_history_json(windows_env):
    install_vscode(windows_env)
    make_database(windows_env, [("history.recentlyOpenedPathsList", "not json")])
    programs = make_start_menu(windows_env)
    with pytest.raises(SystemExit):
        main(["code"])
    assert (programs / "CodeOpener").is_dir()