"""Textual widget that hosts a Viewport and paints its frames."""

from typing import List, Optional

from rich.control import strip_control_codes
from rich.segment import Segment
from textual import events
from textual.message import Message
from textual.reactive import reactive
from textual.strip import Strip
from textual.widget import Widget

from .viewport import Viewport


class ViewportView(Widget):
    """Paints a Viewport and forwards scroll requests to it."""

    DEFAULT_CSS = """
    ViewportView {
        height: 1fr;
    }
    """

    high_performance_rendering = reactive(False)

    class Scrolled(Message):
        """Message sent when the viewport offset changes."""

        def __init__(self, offset: int, percent: float) -> None:
            self.offset = offset
            self.percent = percent
            super().__init__()

    def __init__(
        self,
        text: str = "",
        mouse_wheel_lines: int = 3,
        high_performance_rendering: bool = False,
        *args,
        **kwargs
    ):
        super().__init__(*args, **kwargs)
        self.viewport = Viewport(high_performance_rendering=high_performance_rendering)
        self.viewport.set_content(text)
        self.mouse_wheel_lines = mouse_wheel_lines
        self.can_focus = True
        self.set_reactive(ViewportView.high_performance_rendering, high_performance_rendering)

    def watch_high_performance_rendering(self, value: bool) -> None:
        self.viewport.high_performance_rendering = value
        self.refresh()

    def on_resize(self, event: events.Resize) -> None:
        """Keep the viewport the same size as the widget."""
        old_offset = self.viewport.offset
        self.viewport.set_size(event.size.width, event.size.height)
        self.refresh()
        # A taller window can pull the offset back up
        if self.viewport.offset != old_offset:
            self._after_scroll(self.viewport.visible_lines())

    def render_line(self, y: int) -> Strip:
        """
        Render one row of the visible window.

        Rows come straight from the visible lines rather than from
        ``Viewport.render()``, so this widget is also the renderer that
        high-performance mode relies on.
        """
        visible = self.viewport.visible_lines()
        width = self.size.width

        if y >= len(visible) or not visible[y]:
            return Strip.blank(width, self.rich_style)

        text = strip_control_codes(visible[y].expandtabs())
        strip = Strip([Segment(text)]).crop(0, width)
        return strip.apply_style(self.rich_style)

    def _after_scroll(self, window: Optional[List[str]]) -> bool:
        if window is None:
            return False
        self.refresh()
        self.post_message(
            self.Scrolled(self.viewport.offset, self.viewport.scroll_percent())
        )
        return True

    def set_content(self, text: str) -> None:
        """Replace the displayed text."""
        old_offset = self.viewport.offset
        self.viewport.set_content(text)
        self.refresh()
        if self.viewport.offset != old_offset:
            self._after_scroll(self.viewport.visible_lines())

    def page_down(self) -> bool:
        return self._after_scroll(self.viewport.page_down())

    def page_up(self) -> bool:
        return self._after_scroll(self.viewport.page_up())

    def half_page_down(self) -> bool:
        return self._after_scroll(self.viewport.half_page_down())

    def half_page_up(self) -> bool:
        return self._after_scroll(self.viewport.half_page_up())

    def line_down(self, n: int = 1) -> bool:
        return self._after_scroll(self.viewport.line_down(n))

    def line_up(self, n: int = 1) -> bool:
        return self._after_scroll(self.viewport.line_up(n))

    def go_to_top(self) -> bool:
        return self._after_scroll(self.viewport.go_to_top())

    def go_to_bottom(self) -> bool:
        return self._after_scroll(self.viewport.go_to_bottom())

    def on_mouse_scroll_down(self, event: events.MouseScrollDown) -> None:
        event.stop()
        self.line_down(self.mouse_wheel_lines)

    def on_mouse_scroll_up(self, event: events.MouseScrollUp) -> None:
        event.stop()
        self.line_up(self.mouse_wheel_lines)
