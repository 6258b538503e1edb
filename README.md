# codeopener

A small terminal tool for Windows. It reads the list of recently opened
project folders from VS Code, VSCodium or Cursor. For each project you pick,
it writes a Start Menu shortcut. The shortcut starts the editor with
`--folder-uri <folder>`.

Shortcuts are `.lnk` files in
`%APPDATA%\Microsoft\Windows\Start Menu\Programs\CodeOpener`. The tool creates
that folder if it does not exist yet. The `Programs` folder above it must
already exist.

## Installation

```
pip install .
```

## Usage

Give the editor as the first argument:

```
codeopener vscode
codeopener vscodium
codeopener cursor
```

`code` and `codium` are accepted as aliases. The editor name is not
case-sensitive.

The command works only on Windows. On any other platform it stops with
"This OS is not supported." It also stops with a message when no editor is
given. It stops when the editor's executable, its data folder or its state
database cannot be found, or when the database holds no history of recently
opened paths.

A full-screen checklist of the editor's recent project folders appears, ten
to a page. Each line shows the folder's name and its decoded URI. Projects
that already have a shortcut of the same name are checked when the list opens.

| Key                          | Action                                   |
|------------------------------|------------------------------------------|
| `up`, `k`, `shift+tab`       | move the cursor up                       |
| `down`, `j`, `tab`           | move the cursor down                     |
| `left`, `h`, `pgup`          | previous page                            |
| `right`, `l`, `pgdown`       | next page                                |
| `enter`, `space`             | toggle a project, or press **Confirm**   |
| `esc`, `q`, `ctrl+c`         | quit                                     |

Moving the cursor wraps between the items of the current page and the
**Confirm** button.

When you press **Confirm**, a shortcut is written, or rewritten, for every
checked project. The existing shortcut of every project you unchecked is
deleted. After that a success message is shown. Press escape to leave.

## Requirements

* Windows
* The editor installed in its default location:
  * VS Code: `%LOCALAPPDATA%\Programs\Microsoft VS Code\Code.exe`
  * VSCodium: `%PROGRAMFILES%\VSCodium\VSCodium.exe`
  * Cursor: `%LOCALAPPDATA%\Programs\cursor\Cursor.exe`
* The editor's state database at
  `%APPDATA%\<Editor>\User\globalStorage\state.vscdb`, where `<Editor>` is
  `Code`, `VSCodium` or `Cursor`

## Use as a library

* `codeopener.vscode`
  * `get_recently_opened_projects(sql_file)` returns the raw history JSON
    from the state database. It raises `LookupError` when the database holds
    no history.
  * `parse_recently_opened_projects(history)` turns that JSON into a list of
    `Entry(folder, label)`. Only folder entries are kept.
  * `display_folder_path(path)` decodes a folder URI for display.
* `codeopener.windows`
  * `get_editor_path`, `get_editor_executable_path` and
    `get_sqlite_database_path` find the editor's files. They raise
    `ShortcutError` when a file or folder is missing.
  * `get_existing_shortcuts()` lists the `.lnk` files in the shortcut folder
    as `Link(path, label)`.
  * `create_shortcut(target, link, name)` writes a shortcut named `name`.
    The shortcut runs `target` with `--folder-uri <link>`.
  * `create_windows_shortcut` writes the shell link file itself.
  * `remove_shortcut(name)` deletes a shortcut.
* `codeopener.ui`
  * `init_model(editor_path, projects, shortcuts)` builds the picker `Model`.
  * `Model.update(key)` applies a key name. It returns `True` when the picker
    should quit.
  * `Model.view()` renders the screen as text.
  * `submit(model)` applies the selection.
  * `loop(model)` runs the picker in the terminal.

## What it does not do

It does not start the editor or open any project itself. It only writes and
deletes the shortcut files. The shortcut files are written directly and carry
only a target, arguments and a description. They have no icon, hotkey or
working directory.

## Running the tests

```
pip install .[test]
pytest
```