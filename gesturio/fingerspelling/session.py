"""Translator session: the single state container behind the UI.

The session owns the text buffer and the navigation flag. Every mutation
recomputes the translation and the active letter from the buffer and
pushes an immutable snapshot to subscribers, which re-render from it.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from gesturio.core.types import Screen
from gesturio.core.utils import clamp_text

from .normalizer import TranslationResult, translate
from .resolver import SignSymbol, SymbolResolver
from .selector import active_letter

logger = logging.getLogger(__name__)

Subscriber = Callable[["SessionSnapshot"], None]


@dataclass(frozen=True)
class SessionSnapshot:
    """Everything the presentation layer needs to draw one frame.

    Attributes:
        screen: Which screen is showing
        text: Current text buffer
        result: Word groups for the buffer (empty when the buffer is empty)
        cards: Resolved symbols, grouped like result.words
        hero: Symbol for the most recently typed letter, if any
    """

    screen: Screen = Screen.HOME
    text: str = ""
    result: TranslationResult = field(default_factory=TranslationResult)
    cards: tuple[tuple[SignSymbol, ...], ...] = ()
    hero: Optional[SignSymbol] = None

    @property
    def is_empty(self) -> bool:
        """True when the translator should show its empty state."""
        return not self.text

    @property
    def show_hero(self) -> bool:
        return bool(self.text) and self.hero is not None


class TranslatorSession:
    """Single-writer state container for the two-screen app flow."""

    def __init__(self, resolver: SymbolResolver, max_input_length: int = 2000):
        """Initialize on the home screen with an empty buffer.

        Args:
            resolver: Resolver used for cards and the hero preview
            max_input_length: Longer input is truncated to this many characters
        """
        self.resolver = resolver
        self.max_input_length = max_input_length
        self._screen = Screen.HOME
        self._text = ""
        self._subscribers: list[Subscriber] = []
        self._snapshot = self._compute()

    @property
    def screen(self) -> Screen:
        return self._screen

    @property
    def text(self) -> str:
        return self._text

    @property
    def snapshot(self) -> SessionSnapshot:
        return self._snapshot

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback for every new snapshot.

        The callback is invoked immediately with the current snapshot.

        Returns:
            Function that removes the subscription
        """
        self._subscribers.append(callback)
        callback(self._snapshot)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def start(self) -> SessionSnapshot:
        """Leave the home screen for the translator ("Let's Start")."""
        self._screen = Screen.TRANSLATOR
        return self._publish()

    def go_home(self) -> SessionSnapshot:
        """Return to the home screen, discarding the text buffer."""
        self._screen = Screen.HOME
        self._text = ""
        return self._publish()

    def set_text(self, text: str) -> SessionSnapshot:
        """Replace the text buffer (one keystroke or paste)."""
        if len(text) > self.max_input_length:
            logger.warning(
                "Input of %d characters truncated to %d", len(text), self.max_input_length
            )
            text = clamp_text(text, self.max_input_length)
        self._text = text
        return self._publish()

    def clear(self) -> SessionSnapshot:
        """Empty the text buffer."""
        return self.set_text("")

    def _compute(self) -> SessionSnapshot:
        if not self._text:
            # Empty buffer shows the empty state; nothing to translate
            return SessionSnapshot(screen=self._screen)

        result = translate(self._text)
        cards = tuple(tuple(group) for group in self.resolver.resolve_result(result))
        latest = active_letter(self._text)
        hero = self.resolver.resolve(latest) if latest is not None else None
        return SessionSnapshot(
            screen=self._screen,
            text=self._text,
            result=result,
            cards=cards,
            hero=hero,
        )

    def _publish(self) -> SessionSnapshot:
        self._snapshot = self._compute()
        for callback in list(self._subscribers):
            callback(self._snapshot)
        return self._snapshot
