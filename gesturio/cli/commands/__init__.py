"""CLI commands."""

from .translate import translate, spell
from .interactive import interactive
from .assets import assets, show

__all__ = [
    "translate",
    "spell",
    "interactive",
    "assets",
    "show",
]
