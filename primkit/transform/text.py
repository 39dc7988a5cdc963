"""
Case and format transforms for free text.

Every transform accepts any value and runs it through safe_string first, so
None and UNSET produce "" instead of raising.

Features:
- to_lower / to_upper / trim
- titleize: "siR isAAC newTON" → "Sir Isaac Newton"
- kebab / snake: NFKD-normalized, punctuation-free, single separator
- alphanumeric / numeric: character filters
- extract_words / extract_numbers: tokenizers
"""
import re
import unicodedata
from typing import Any, Iterator, List

from primkit.core.coercion import safe_string

_WHITESPACE_RE = re.compile(r"\s+")
_SEPARATOR_RE = re.compile(r"[-_]")
_PUNCTUATION_RE = re.compile(r"[^a-zA-Z0-9\s]")
_NON_DIGIT_RE = re.compile(r"\D")
_DIGIT_RUN_RE = re.compile(r"\d+")

# Letters and digits; underscores and hyphens split words. An apostrophe
# is part of a word only between two word characters ("doesn't").
_WORD_RE = re.compile(r"[^\W_]+(?:'[^\W_]+)*")


class TokenStream:
    """
    Lazy, restartable sequence of regex tokens found in a text.

    Nothing is scanned until iteration, and every iteration scans the text
    again from the start, so the same stream can be consumed many times.
    """

    __slots__ = ("_pattern", "_text")

    def __init__(self, pattern: "re.Pattern[str]", text: str):
        self._pattern = pattern
        self._text = text

    def __iter__(self) -> Iterator[str]:
        for match in self._pattern.finditer(self._text):
            yield match.group(0)

    def __repr__(self) -> str:
        return f"TokenStream({self._pattern.pattern!r}, {self._text!r})"


def to_lower(text: Any) -> str:
    """Lowercase; locale-independent."""
    return safe_string(text).lower()


def to_upper(text: Any) -> str:
    """Uppercase; locale-independent."""
    return safe_string(text).upper()


def trim(text: Any) -> str:
    """Strip leading and trailing whitespace."""
    return safe_string(text).strip()


def titleize(text: Any) -> str:
    """
    Convert text to Title Case.

    The text is lowercased, underscores become spaces, and the first
    character of every space-separated segment is uppercased. Hyphens are
    not boundaries.

    Examples:
        titleize("hello world") → "Hello World"
        titleize("hello_world") → "Hello World"
        titleize("kebab-case") → "Kebab-case"
        titleize("HELLO wORLD") → "Hello World"
    """
    segments = to_lower(text).replace("_", " ").split(" ")
    return " ".join(segment[:1].upper() + segment[1:] for segment in segments)


def _strip_punctuation(text: str) -> str:
    """
    Steps:
    1. NFKD Unicode normalization (accents become combining marks)
    2. Hyphens and underscores become spaces
    3. Collapse whitespace runs
    4. Drop everything that is not an ASCII letter, digit or whitespace
    """
    s = unicodedata.normalize("NFKD", text)
    s = _SEPARATOR_RE.sub(" ", s)
    s = _WHITESPACE_RE.sub(" ", s)
    return _PUNCTUATION_RE.sub("", s)


def kebab(text: Any) -> str:
    """
    Convert text to kebab-case.

    Examples:
        kebab("HELLO WORLD!") → "hello-world"
        kebab("snake_case_to_kebab-case") → "snake-case-to-kebab-case"
        kebab("Crème Brûlée") → "creme-brulee"
    """
    s = _strip_punctuation(to_lower(text)).strip()
    return _WHITESPACE_RE.sub("-", s)


def snake(text: Any) -> str:
    """Convert text to snake_case (kebab-case with underscores)."""
    return kebab(text).replace("-", "_")


def alphanumeric(text: Any) -> str:
    """Keep only letters, digits and spaces: "Hello World!!" → "Hello World"."""
    return "".join(ch for ch in safe_string(text) if ch.isalnum() or ch == " ")


def numeric(text: Any) -> str:
    """
    Keep only decimal digits.

    Decimal points and separators are dropped too: "0.32" → "032",
    "(555) 012-0011" → "5550120011".
    """
    return _NON_DIGIT_RE.sub("", safe_string(text))


def extract_words(text: Any) -> TokenStream:
    """
    Lazily split text into words.

    Example:
        list(extract_words("Hello-World, doesn't 12?"))
        → ["Hello", "World", "doesn't", "12"]
    """
    return TokenStream(_WORD_RE, safe_string(text))


def extract_numbers(text: Any) -> List[str]:
    """
    Extract every maximal run of digits, in order.

    Examples:
        extract_numbers("Version 2.0.2") → ["2", "0", "2"]
        extract_numbers("Price $12.32") → ["12", "32"]
    """
    return _DIGIT_RUN_RE.findall(safe_string(text))
