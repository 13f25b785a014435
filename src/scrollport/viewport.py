"""Scrolling arithmetic for a fixed-size window onto a block of text."""

import logging
from typing import Any, List, Optional, Tuple

from .model import Command, Model


logger = logging.getLogger(__name__)


class Viewport(Model):
    """
    A width x height window onto an arbitrarily long list of lines.

    ``offset`` is the index of the topmost visible line and always satisfies
    ``0 <= offset <= max(0, len(lines) - height)``.

    Scroll operations return the visible window after the move, or ``None``
    when nothing moved (already at the boundary, or a zero delta).
    """

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        high_performance_rendering: bool = False
    ):
        self.width = width
        self._height = height
        self._offset = 0
        self.cursor_position = 0  # Owned by the host; scrolling never reads it
        self.high_performance_rendering = high_performance_rendering
        self._lines: List[str] = []

    @property
    def lines(self) -> List[str]:
        return self._lines

    @property
    def height(self) -> int:
        return self._height

    @height.setter
    def height(self, value: int) -> None:
        self._height = value
        self.offset = self._offset

    @property
    def offset(self) -> int:
        return self._offset

    @offset.setter
    def offset(self, value: int) -> None:
        self._offset = max(0, min(value, self.max_offset))

    @property
    def max_offset(self) -> int:
        """Largest offset that still keeps the last line on screen."""
        return max(0, len(self._lines) - self._height)

    def set_size(self, width: int, height: int) -> None:
        """Resize the window, keeping the offset in bounds."""
        self.width = width
        self.height = height

    def at_top(self) -> bool:
        return self._offset == 0

    def at_bottom(self) -> bool:
        # Content shorter than the window is always at the bottom
        return self._offset >= len(self._lines) - self._height

    def scroll_percent(self) -> float:
        """Scroll progress in [0.0, 1.0]; 1.0 when everything fits."""
        scrollable = len(self._lines) - self._height
        if scrollable <= 0:
            return 1.0
        return max(0.0, min(1.0, self._offset / scrollable))

    def set_content(self, text: str) -> None:
        """
        Replace the content with ``text``.

        CRLF pairs are normalized to LF before splitting into lines. If the
        current offset no longer fits the new content, the viewport snaps
        to the bottom.
        """
        self._lines = text.replace("\r\n", "\n").split("\n")
        logger.debug(f"Content set: {len(self._lines)} lines")

        if self._offset > self.max_offset:
            self.go_to_bottom()

    def visible_lines(self) -> List[str]:
        """Lines currently on screen."""
        if not self._lines:
            return []
        bottom = min(len(self._lines), self._offset + self._height)
        return self._lines[self._offset:bottom]

    def _move_to(self, target: int) -> Optional[List[str]]:
        """Move to a clamped target offset, or report no movement."""
        target = max(0, min(target, self.max_offset))
        if target == self._offset:
            return None

        logger.debug(f"Scrolled {self._offset} -> {target}")
        self._offset = target
        return self.visible_lines()

    def page_down(self) -> Optional[List[str]]:
        if self.at_bottom():
            return None
        return self._move_to(self._offset + self._height)

    def page_up(self) -> Optional[List[str]]:
        if self.at_top():
            return None
        return self._move_to(self._offset - self._height)

    def half_page_down(self) -> Optional[List[str]]:
        if self.at_bottom():
            return None
        return self._move_to(self._offset + self._height // 2)

    def half_page_up(self) -> Optional[List[str]]:
        if self.at_top():
            return None
        return self._move_to(self._offset - self._height // 2)

    def line_down(self, n: int = 1) -> Optional[List[str]]:
        """Scroll down ``n`` lines, stopping at the last line."""
        if self.at_bottom() or n <= 0:
            return None

        below = len(self._lines) - (self._offset + self._height)
        return self._move_to(self._offset + min(n, below))

    def line_up(self, n: int = 1) -> Optional[List[str]]:
        """Scroll up ``n`` lines, stopping at the first line."""
        if self.at_top() or n <= 0:
            return None
        return self._move_to(self._offset - min(n, self._offset))

    def go_to_top(self) -> Optional[List[str]]:
        if self.at_top():
            return None
        return self._move_to(0)

    def go_to_bottom(self) -> List[str]:
        """Jump to the last page. Always returns the visible window."""
        self._offset = self.max_offset
        return self.visible_lines()

    def render(self) -> str:
        """
        Render exactly ``height`` rows.

        In high-performance mode only blank rows are emitted, leaving the
        real content to an external renderer that blits it directly.
        """
        if self.high_performance_rendering:
            return "\n" * max(0, self._height - 1)

        rows = self.visible_lines()
        if len(rows) < self._height:
            rows = rows + [""] * (self._height - len(rows))
        return "\n".join(rows)

    def react(self, event: Any) -> Tuple["Viewport", Optional[Command]]:
        """Events are mapped to scroll operations by the host, not here."""
        logger.debug(f"Ignoring event {event!r}")
        return self, None
