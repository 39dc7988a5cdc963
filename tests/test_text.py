"""
Tests for case and format transforms.

Validates:
- Idempotency (t(t(x)) == t(x)) for lower/trim/kebab/snake
- Absent input degrades to ""
- Tokenizer behavior for words and numbers
"""
import pytest
from primkit.core.type_system import UNSET
from primkit.transform.text import (
    TokenStream,
    alphanumeric,
    extract_numbers,
    extract_words,
    kebab,
    numeric,
    snake,
    titleize,
    to_lower,
    to_upper,
    trim,
)

SAMPLES = [
    "HELLO WORLD!",
    " THIS STRING   HAS WEIRD spacing",
    "snake_case_to_kebab-case",
    "Crème Brûlée",
    "\tTabs\nand newlines ",
    "",
]


class TestCaseFolding:
    """Tests for to_lower / to_upper / trim."""

    def test_lower(self):
        """Test lowercase conversion."""
        assert to_lower("HELLO World") == "hello world"

    def test_upper(self):
        """Test uppercase conversion."""
        assert to_upper("hello world") == "HELLO WORLD"

    def test_trim(self):
        """Test whitespace trimming keeps inner spacing."""
        assert trim(" hello") == "hello"
        assert trim(" Hello  World  ") == "Hello  World"
        assert trim("hello\n") == "hello"

    def test_absent_input(self):
        """Test None and UNSET become the empty string."""
        assert to_lower(None) == ""
        assert to_upper(UNSET) == ""
        assert trim(None) == ""

    def test_non_string_input(self):
        """Test other values are coerced first."""
        assert to_upper(True) == "TRUE"
        assert to_lower(["A"]) == '["a"]'

    @pytest.mark.parametrize("text", SAMPLES)
    def test_idempotency(self, text):
        """Test applying twice gives the same result."""
        assert to_lower(to_lower(text)) == to_lower(text)
        assert trim(trim(text)) == trim(text)


class TestTitleize:
    """Tests for titleize."""

    def test_mixed_case(self):
        """Test every word is capitalized, the rest lowercased."""
        assert titleize("siR isAAC newTON") == "Sir Isaac Newton"
        assert titleize("HELLO wORLD") == "Hello World"

    def test_underscores_are_spaces(self):
        """Test underscores split words."""
        assert titleize("hello_world") == "Hello World"
        assert titleize(snake("Sir Isaac Newton")) == "Sir Isaac Newton"

    def test_hyphens_are_kept(self):
        """Test hyphens are not word boundaries."""
        assert titleize("kebab-case") == "Kebab-case"
        assert titleize(kebab("Sir Isaac Newton")) == "Sir-isaac-newton"

    def test_repeated_spaces(self):
        """Test empty segments are preserved."""
        assert titleize("a  b") == "A  B"

    def test_absent_input(self):
        """Test None becomes the empty string."""
        assert titleize(None) == ""


class TestKebab:
    """Tests for kebab."""

    def test_basic(self):
        """Test punctuation is dropped and spaces become hyphens."""
        assert kebab("HELLO WORLD!") == "hello-world"
        assert kebab("snake_case_to_kebab-case") == "snake-case-to-kebab-case"
        assert kebab(" THIS STRING   HAS WEIRD spacing") == "this-string-has-weird-spacing"

    def test_diacritics_removed(self):
        """Test accents are stripped by NFKD normalization."""
        assert kebab("Crème Brûlée") == "creme-brulee"

    def test_punctuation_between_words(self):
        """Test a lone punctuation token does not leave double hyphens."""
        assert kebab("rock & roll") == "rock-roll"

    def test_absent_input(self):
        """Test None becomes the empty string."""
        assert kebab(None) == ""

    @pytest.mark.parametrize("text", SAMPLES)
    def test_idempotency(self, text):
        """Test kebab is stable under repetition and snake round-trips."""
        assert kebab(kebab(text)) == kebab(text)
        assert kebab(snake(text)) == kebab(text)


class TestSnake:
    """Tests for snake."""

    def test_basic(self):
        """Test spaces and hyphens become underscores."""
        assert snake("HELLO WORLD!!") == "hello_world"
        assert snake("kebab-case-to-snake-case") == "kebab_case_to_snake_case"
        assert snake(" THIS STRING    HAS weird spacing?") == "this_string_has_weird_spacing"

    @pytest.mark.parametrize("text", SAMPLES)
    def test_idempotency(self, text):
        """Test snake is stable under repetition and kebab round-trips."""
        assert snake(snake(text)) == snake(text)
        assert snake(kebab(text)) == snake(text)
        assert "-" not in snake(text)


class TestCharacterFilters:
    """Tests for alphanumeric / numeric."""

    def test_alphanumeric(self):
        """Test punctuation is removed and spaces kept."""
        assert alphanumeric("Hello World!!") == "Hello World"
        assert alphanumeric("a_b-c") == "abc"

    def test_numeric(self):
        """Test only digits survive."""
        assert numeric("0.32") == "032"
        assert numeric("tel:(555)-012-0011") == "5550120011"
        assert numeric("no digits") == ""

    def test_absent_input(self):
        """Test None becomes the empty string."""
        assert alphanumeric(None) == ""
        assert numeric(None) == ""


class TestExtractWords:
    """Tests for extract_words."""

    def test_punctuation_separates(self):
        """Test punctuation and hyphens split words."""
        assert list(extract_words("Hello, World!!!")) == ["Hello", "World"]
        assert list(extract_words("Hello-World!!!")) == ["Hello", "World"]

    def test_apostrophes_and_digits(self):
        """Test inner apostrophes stay and digits count as word characters."""
        text = "this_is_a_snake_case_string and doesn't not have apostrophe 12?"
        assert list(extract_words(text)) == [
            "this",
            "is",
            "a",
            "snake",
            "case",
            "string",
            "and",
            "doesn't",
            "not",
            "have",
            "apostrophe",
            "12",
        ]

    def test_outer_apostrophes_dropped(self):
        """Test quotes around a word are not part of it."""
        assert list(extract_words("'quoted' rock'n'roll")) == ["quoted", "rock'n'roll"]

    def test_restartable(self):
        """Test the stream can be iterated more than once."""
        words = extract_words("one two")
        assert isinstance(words, TokenStream)
        assert list(words) == ["one", "two"]
        assert list(words) == ["one", "two"]

    def test_absent_input(self):
        """Test None yields no words."""
        assert list(extract_words(None)) == []


class TestExtractNumbers:
    """Tests for extract_numbers."""

    def test_digit_runs(self):
        """Test every non-digit is a separator."""
        assert extract_numbers("Version 2.0.2") == ["2", "0", "2"]
        assert extract_numbers("Price $12.32") == ["12", "32"]
        assert extract_numbers("tel:(555)-012-0011") == ["555", "012", "0011"]

    def test_no_numbers(self):
        """Test text without digits and absent input."""
        assert extract_numbers("none here") == []
        assert extract_numbers(None) == []
