"""Interactive terminal picker for project shortcuts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from blessed import Terminal

from codeopener.vscode import Entry, display_folder_path
from codeopener.windows import Link, create_shortcut, remove_shortcut

PER_PAGE = 10
DOT = "•"

QUIT_KEYS = frozenset({"esc", "ctrl+c", "q"})
UP_KEYS = frozenset({"up", "k", "shift+tab"})
DOWN_KEYS = frozenset({"down", "j", "tab"})
PREV_PAGE_KEYS = frozenset({"left", "h", "pgup"})
NEXT_PAGE_KEYS = frozenset({"right", "l", "pgdown"})
TOGGLE_KEYS = frozenset({"enter", " "})

_SEQUENCE_NAMES = {
    "KEY_UP": "up", "KEY_DOWN": "down", "KEY_LEFT": "left", "KEY_RIGHT": "right",
    "KEY_PGUP": "pgup", "KEY_PGDOWN": "pgdown", "KEY_ENTER": "enter",
    "KEY_ESCAPE": "esc", "KEY_TAB": "tab", "KEY_BTAB": "shift+tab",
}
_CHAR_NAMES = {"\x03": "ctrl+c", "\t": "tab", "\r": "enter", "\n": "enter", "\x1b": "esc"}

Style = Callable[[str], str]


@dataclass
class Styles:
    """Callables that decorate each kind of text in the view."""

    label: Style = str
    faint: Style = str
    checked: Style = str
    checkbox: Style = str
    border: Style = str
    success: Style = str


@dataclass
class Paginator:
    """Page bookkeeping for a list shown a page at a time, drawn as dots."""

    page: int = 0
    per_page: int = 1
    total_pages: int = 1
    active_dot: str = DOT
    inactive_dot: str = DOT

    def set_total_pages(self, items: int) -> int:
        """Derive the page count from an item count; fewer than one item keeps it."""
        if items >= 1:
            self.total_pages = -(-items // self.per_page)
        return self.total_pages

    def items_on_page(self, total_items: int) -> int:
        if total_items < 1:
            return 0
        start, end = self.slice_bounds(total_items)
        return end - start

    def slice_bounds(self, length: int) -> tuple[int, int]:
        start = self.page * self.per_page
        return start, min(start + self.per_page, length)

    def on_last_page(self) -> bool:
        return self.page == self.total_pages - 1

    def on_first_page(self) -> bool:
        return self.page == 0

    def next_page(self) -> None:
        if not self.on_last_page():
            self.page += 1

    def prev_page(self) -> None:
        if self.page > 0:
            self.page -= 1

    def update(self, key: str) -> None:
        """Turn the page for page-navigation keys."""
        if key in NEXT_PAGE_KEYS:
            self.next_page()
        elif key in PREV_PAGE_KEYS:
            self.prev_page()

    def view(self) -> str:
        return "".join(
            self.active_dot if index == self.page else self.inactive_dot
            for index in range(self.total_pages)
        )


@dataclass
class Model:
    """State of the shortcut picker."""

    editor_path: str
    projects: list[Entry]
    shortcuts: list[Link]
    paginator: Paginator = field(default_factory=Paginator)
    selected: dict[int, bool] = field(default_factory=dict)
    cursor: int = 0
    completed: bool = False
    confirm_button_index: int = 0
    styles: Styles = field(default_factory=Styles)

    def update(self, key: str) -> bool:
        """Apply a key press; return True when the picker should quit."""
        pager = self.paginator
        pager.update(key)
        start = pager.page * pager.per_page
        if pager.on_last_page():
            end = start + pager.items_on_page(len(self.projects)) - 1
        else:
            end = start + pager.per_page - 1

        if key in QUIT_KEYS:
            return True
        if key in UP_KEYS:
            if self.cursor == self.confirm_button_index:
                self.cursor = end
            elif self.cursor == start:
                self.cursor = self.confirm_button_index
            else:
                self.cursor -= 1
        elif key in DOWN_KEYS:
            if self.cursor == self.confirm_button_index:
                self.cursor = start
            elif self.cursor == end:
                self.cursor = self.confirm_button_index
            else:
                self.cursor += 1
        elif key in PREV_PAGE_KEYS or key in NEXT_PAGE_KEYS:
            self.cursor = start
        elif key in TOGGLE_KEYS:
            if self.cursor != self.confirm_button_index:
                self.selected[self.cursor] = not self.selected.get(self.cursor, False)
            else:
                submit(self)
                self.completed = True
        return False

    def view(self) -> str:
        styles = self.styles
        if self.completed:
            return (
                styles.success("Completed successfully!") + "\n"
                + styles.success("Press escape (or ctrl+c) to exit!") + "\n"
            )
        caption = "> Confirm <" if self.cursor == self.confirm_button_index else "Confirm"
        return (
            styles.label("Select the projects that should be added as a shortcut.") + "\n"
            + styles.faint("Entries that are left unchecked will be removed.") + "\n\n"
            + render_paginator(self) + "\n\n"
            + _boxed(caption, styles.border)
        )


def _boxed(text: str, border: Style) -> str:
    """Draw text inside a rounded border with two columns of side padding."""
    rule = "─" * (len(text) + 4)
    return "\n".join((
        border("╭" + rule + "╮"),
        border("│") + "  " + text + "  " + border("│"),
        border("╰" + rule + "╯"),
    ))


def init_model(editor_path: str, projects: list[Entry], shortcuts: list[Link]) -> Model:
    """Build the picker, preselecting projects that already have a shortcut."""
    pager = Paginator(per_page=PER_PAGE)
    pager.set_total_pages(len(projects))
    labels = {shortcut.label for shortcut in shortcuts}
    return Model(
        editor_path=editor_path,
        projects=list(projects),
        shortcuts=list(shortcuts),
        paginator=pager,
        selected={i: True for i, project in enumerate(projects) if project.label in labels},
        confirm_button_index=len(projects),
    )


def render_paginator(model: Model) -> str:
    """Render the checkbox lines of the current page and the page indicator."""
    styles = model.styles
    start, end = model.paginator.slice_bounds(len(model.projects))
    lines = (
        styles.checkbox(f"{'>' if model.cursor == index else ' '} [")
        + styles.checked("x" if model.selected.get(index, False) else " ")
        + styles.checkbox(f"] {choice.label}")
        + styles.faint(f" ({display_folder_path(choice.folder)})")
        + "\n"
        for index, choice in enumerate(model.projects[start:end], start=start)
    )
    return "".join(lines) + "  " + model.paginator.view()


def submit(model: Model) -> None:
    """Create shortcuts for checked projects and remove those unchecked."""
    labels = {shortcut.label for shortcut in model.shortcuts}
    for index, selected in list(model.selected.items()):
        project = model.projects[index]
        if selected:
            create_shortcut(model.editor_path, project.folder, project.label)
        elif project.label in labels:
            remove_shortcut(project.label)


def _key_name(keystroke) -> str:
    if keystroke.is_sequence:
        return _SEQUENCE_NAMES.get(keystroke.name or "", "")
    return _CHAR_NAMES.get(str(keystroke), str(keystroke))


def loop(model: Model) -> None:
    """Run the picker full screen until the user quits."""
    term = Terminal()
    model.styles = Styles(
        faint=term.dim,
        checked=term.color(3),
        checkbox=term.color(7),
        border=term.color(69),
        success=term.color(2),
    )
    model.paginator.active_dot = term.color(252)(DOT)
    model.paginator.inactive_dot = term.color(238)(DOT)

    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        try:
            while True:
                print(term.home + term.clear + model.view(), end="", flush=True)
                name = _key_name(term.inkey())
                if name and model.update(name):
                    return
        except KeyboardInterrupt:
            return