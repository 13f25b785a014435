"""Pager application: a ViewportView plus a status bar."""

import logging
from pathlib import Path
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from .config import Config
from .viewport_view import ViewportView


logger = logging.getLogger(__name__)


class PagerApp(App):
    """Read-only pager for a single text file."""

    CSS = """
    #status-bar {
        height: 1;
        background: $boost;
        color: $text;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("j,down", "line_down", "Down", show=False),
        Binding("k,up", "line_up", "Up", show=False),
        Binding("space,f,pagedown", "page_down", "Page Down"),
        Binding("b,pageup", "page_up", "Page Up"),
        Binding("d", "half_page_down", "Half Down", show=False),
        Binding("u", "half_page_up", "Half Up", show=False),
        Binding("g,home", "go_to_top", "Top", show=False),
        Binding("G,end", "go_to_bottom", "Bottom", show=False),
        Binding("r", "reload", "Reload"),
    ]

    def __init__(self, file_path: str, config: Optional[Config] = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.file_path = file_path
        self.config = config or Config.default()

    def compose(self) -> ComposeResult:
        """Create the pager layout."""
        yield ViewportView(
            self._read_file(),
            mouse_wheel_lines=self.config.mouse_wheel_lines,
            high_performance_rendering=self.config.high_performance_rendering,
            id="viewport",
        )
        yield Static("", id="status-bar")

    def on_mount(self) -> None:
        self.query_one(ViewportView).focus()
        self._update_status()

    def _read_file(self) -> str:
        """Read the file, or describe why it could not be read."""
        try:
            text = Path(self.file_path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read {self.file_path}: {e}")
            return f"Error loading file: {e}"

        logger.info(f"Loaded {self.file_path}")
        return text

    @property
    def view(self) -> ViewportView:
        return self.query_one(ViewportView)

    def status_text(self) -> str:
        """Status line: file name, position and scroll percentage."""
        viewport = self.view.viewport
        total = len(viewport.lines)
        shown = min(total, viewport.offset + viewport.height)
        percent = round(viewport.scroll_percent() * 100)
        return f"{Path(self.file_path).name}  {shown}/{total}  {percent}%"

    def _update_status(self) -> None:
        self.query_one("#status-bar", Static).update(self.status_text())

    def on_viewport_view_scrolled(self, message: ViewportView.Scrolled) -> None:
        self._update_status()

    def action_line_down(self) -> None:
        self.view.line_down()

    def action_line_up(self) -> None:
        self.view.line_up()

    def action_page_down(self) -> None:
        self.view.page_down()

    def action_page_up(self) -> None:
        self.view.page_up()

    def action_half_page_down(self) -> None:
        self.view.half_page_down()

    def action_half_page_up(self) -> None:
        self.view.half_page_up()

    def action_go_to_top(self) -> None:
        self.view.go_to_top()

    def action_go_to_bottom(self) -> None:
        self.view.go_to_bottom()

    def action_reload(self) -> None:
        """Re-read the file from disk."""
        self.view.set_content(self._read_file())
        self._update_status()
