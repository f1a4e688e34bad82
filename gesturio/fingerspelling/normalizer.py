"""Text normalizer: raw input text to word groups of letters.

The input is split on the single space character, keeping empty tokens,
and every token is reduced to its letters and digits. A token that ends up
empty is dropped unless it is the last one, so a trailing space leaves an
empty "current word" slot for the user to type into.
"""

from dataclasses import dataclass, field
from typing import Any, Iterator

from gesturio.core.utils import display_label, iter_sign_characters, to_lookup_key

WORD_SEPARATOR = " "


@dataclass(frozen=True)
class Letter:
    """A single letter or digit, in its original case."""

    character: str

    @property
    def key(self) -> str:
        """Asset lookup key (lowercase)."""
        return to_lookup_key(self.character)

    @property
    def label(self) -> str:
        """Card label (uppercase)."""
        return display_label(self.character)

    def __str__(self) -> str:
        return self.character


@dataclass(frozen=True)
class Word:
    """Letters of one space-delimited token.

    Attributes:
        letters: Letters in input order
        position: Index of the token in the raw split, counting dropped tokens
        is_last: True for the final token of the input
    """

    letters: tuple[Letter, ...] = ()
    position: int = 0
    is_last: bool = False

    @property
    def characters(self) -> list[str]:
        return [letter.character for letter in self.letters]

    @property
    def text(self) -> str:
        return "".join(self.characters)

    @property
    def is_empty(self) -> bool:
        return not self.letters

    @property
    def label(self) -> str:
        """Heading shown above the word's cards (e.g. "Word 1")."""
        return f"Word {self.position + 1}"

    @property
    def has_divider(self) -> bool:
        """Whether a divider follows this word group."""
        return not self.is_last and not self.is_empty

    def __iter__(self) -> Iterator[Letter]:
        return iter(self.letters)

    def __len__(self) -> int:
        return len(self.letters)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "position": self.position,
            "label": self.label,
            "letters": self.characters,
            "is_last": self.is_last,
        }


@dataclass(frozen=True)
class TranslationResult:
    """Ordered word groups derived from one input string."""

    text: str = ""
    words: tuple[Word, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.words

    @property
    def letters(self) -> list[Letter]:
        """All letters across words, in reading order."""
        return [letter for word in self.words for letter in word]

    @property
    def letter_count(self) -> int:
        return sum(len(word) for word in self.words)

    def to_lists(self) -> list[list[str]]:
        """Words as plain lists of characters.

        Example:
            >>> translate("Hi there").to_lists()
            [['H', 'i'], ['t', 'h', 'e', 'r', 'e']]
        """
        return [word.characters for word in self.words]

    def to_string(self, letter_separator: str = "-", word_separator: str = " ") -> str:
        """Render as fingerspelling glosses, e.g. "H-I T-H-E-R-E"."""
        return word_separator.join(
            letter_separator.join(letter.label for letter in word)
            for word in self.words
            if not word.is_empty
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "text": self.text,
            "words": [word.to_dict() for word in self.words],
            "letter_count": self.letter_count,
        }


def normalize(text: str) -> list[Word]:
    """Split text into word groups of letters and digits.

    Args:
        text: Arbitrary input text

    Returns:
        Words in input order. Empty words appear only in last position.

    Examples:
        >>> [w.characters for w in normalize("Hi  there")]
        [['H', 'i'], ['t', 'h', 'e', 'r', 'e']]
        >>> [w.characters for w in normalize("Hi ")]
        [['H', 'i'], []]
        >>> normalize("")
        []
    """
    if not text:
        return []

    tokens = text.split(WORD_SEPARATOR)
    last_index = len(tokens) - 1

    words = []
    for index, token in enumerate(tokens):
        letters = tuple(Letter(char) for char in iter_sign_characters(token))
        is_last = index == last_index
        if letters or is_last:
            words.append(Word(letters=letters, position=index, is_last=is_last))
    return words


def translate(text: str) -> TranslationResult:
    """Normalize text into a TranslationResult.

    Example:
        >>> translate("Hi there").letter_count
        7
    """
    return TranslationResult(text=text, words=tuple(normalize(text)))
