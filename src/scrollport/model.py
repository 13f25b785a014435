"""Capability contract shared by widgets hosted in a model/view/update loop."""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Tuple

# A follow-up action the host runs after an update; None means nothing to do.
Command = Callable[[], Any]


class Model(ABC):
    """
    A component that renders a text snapshot and reacts to input events.

    The host calls ``render`` once per frame and ``react`` once per event.
    Events are opaque to this interface; each host defines its own.
    """

    @abstractmethod
    def render(self) -> str:
        """Return the current frame. Must not change state."""

    @abstractmethod
    def react(self, event: Any) -> Tuple["Model", Optional[Command]]:
        """
        Consume one event.

        Returns:
            The updated model and an optional follow-up command
        """
