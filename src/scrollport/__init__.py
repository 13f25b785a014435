"""scrollport: a scrollable text viewport for terminal UIs."""

from .model import Command, Model
from .viewport import Viewport

__version__ = "0.1.0"

__all__ = ["Command", "Model", "Viewport", "__version__"]
