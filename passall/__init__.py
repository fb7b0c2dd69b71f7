"""passall -- random password and passphrase generation.

Core functions for building character sets, resolving a dictionary word from
remote word services (with local fallbacks), Caesar-shifting a phrase, and
composing the final password.
"""

import json
import logging
import os
import random
import string
from dataclasses import dataclass
from enum import Enum
from time import monotonic
from typing import Any, Callable

import requests

logger = logging.getLogger(__name__)

MIN_LENGTH = 4
MAX_LENGTH = 32
DEFAULT_LENGTH = 16
MAX_WORD_LENGTH = 8
WORD_FETCH_TIMEOUT = 2


# ── Options ────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class GenerationOptions:
    """Which character classes to draw from, and whether to embed a word."""

    lower: bool = True
    upper: bool = True
    numbers: bool = True
    symbols: bool = True
    word: bool = False


class WordCase(Enum):
    LOWER = "lower"
    UPPER = "upper"
    RANDOM = "random"


@dataclass(frozen=True)
class CipherConfig:
    """A phrase to embed after Caesar-shifting it by *shift* (1-25)."""

    plaintext: str
    shift: int = 3

    def __post_init__(self) -> None:
        _check_shift(self.shift)


# ── Character sets ─────────────────────────────────────────────────────────

LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DIGITS = string.digits
SYMBOLS = "!@#$%^&*()_+{}:\"<>?|[];',./`~\\"


def build_charset(options: GenerationOptions) -> str:
    """Concatenate the alphabets of every enabled class (lower, upper, numbers, symbols)."""
    charset = ""
    if options.lower:
        charset += LOWERCASE
    if options.upper:
        charset += UPPERCASE
    if options.numbers:
        charset += DIGITS
    if options.symbols:
        charset += SYMBOLS
    return charset


def random_chars(length: int, charset: str, rng: random.Random) -> str:
    """Draw *length* characters uniformly from *charset* (empty if it is empty)."""
    if not charset:
        return ""
    return "".join(rng.choice(charset) for _ in range(length))


def splice(filler: str, segment: str, rng: random.Random) -> str:
    """Insert *segment* into *filler* at a uniformly random offset."""
    pos = rng.randint(0, len(filler))
    return filler[:pos] + segment + filler[pos:]


# ── Word providers ─────────────────────────────────────────────────────────
#
# Each remote service answers a GET with JSON in one of a few shapes.  The
# parsers below are the whole set; they return None for anything unexpected
# instead of raising.


def first_string(data: Any, rng: random.Random) -> str | None:
    """``["word", ...]`` -> first entry."""
    if isinstance(data, list) and data and isinstance(data[0], str):
        return data[0]
    return None


def first_word_object(data: Any, rng: random.Random) -> str | None:
    """``[{"word": "..."}, ...]`` -> first entry's word."""
    if isinstance(data, list) and data and isinstance(data[0], dict):
        word = data[0].get("word")
        if isinstance(word, str):
            return word
    return None


def random_word_object(data: Any, rng: random.Random) -> str | None:
    """``[{"word": "..."}, ...]`` -> word of a uniformly chosen entry."""
    if isinstance(data, list) and data:
        item = rng.choice(data)
        if isinstance(item, dict) and isinstance(item.get("word"), str):
            return item["word"]
    return None


@dataclass(frozen=True)
class WordProvider:
    name: str
    url: Callable[[int], str]
    parse: Callable[[Any, random.Random], str | None]


def _wordnik_url(length: int) -> str:
    # Without a real key this provider fails and the next one is tried.
    api_key = os.environ.get("WORDNIK_API_KEY", "YOUR_API_KEY")
    return (
        "https://api.wordnik.com/v4/words.json/randomWords"
        f"?limit=1&minLength={length}&maxLength={length}&api_key={api_key}"
    )


WORD_PROVIDERS = (
    WordProvider(
        "RandomWordAPI",
        lambda n: f"https://random-word-api.herokuapp.com/word?number=1&length={n}",
        first_string,
    ),
    WordProvider(
        "Datamuse",
        lambda n: f"https://api.datamuse.com/words?sp={'?' * n}&max=10",
        random_word_object,
    ),
    WordProvider("Wordnik", _wordnik_url, first_word_object),
    WordProvider(
        "WiktionaryBackups",
        lambda n: f"https://random-word-form.herokuapp.com/random/noun?length={n}",
        first_string,
    ),
)


# ── Local fallbacks ────────────────────────────────────────────────────────

LOCAL_WORDS = tuple(
    word
    for word in (
        "avocado", "bamboo", "cascade", "delight", "echo",
        "flamingo", "gazelle", "harmony", "ivory", "jubilee",
        "koala", "lagoon", "mango", "nirvana", "octopus",
        "penguin", "quasar", "rainbow", "sunset", "tundra",
        "umbra", "vortex", "waterfall", "xylophone", "yellow",
        "zebra", "alpine", "blossom", "coral", "dolphin",
        "evergreen", "firefly", "glacier", "honeydew", "island",
        "jungle", "kiwi", "lighthouse", "mountain", "nebula",
        "oasis", "peacock", "quartz", "river", "starlight",
        "tropical", "unicorn", "volcano", "whirlpool", "xenon", "cats",
        "dogs", "duck", "golf", "jazz", "owls", "moon",
    )
    if len(word) >= 4
)

CONSONANTS = "bcdfghjklmnpqrstvwxyz"
VOWELS = "aeiou"


def fallback_word(length: int, rng: random.Random) -> str:
    """Build a pronounceable word of exactly *length* letters.

    Alternates consonant/vowel picks, starting with a consonant.
    """
    return "".join(
        rng.choice(CONSONANTS if i % 2 == 0 else VOWELS) for i in range(length)
    )


# ── Word source ────────────────────────────────────────────────────────────


class WordSource:
    """Resolve one word of bounded length.

    Remote providers are tried in round-robin order, each at most once per
    call; the rotation *cursor* carries over between calls, so consecutive
    calls start at different providers.  When every provider fails, a word is
    picked from *words*, and when none of those is short enough a synthetic
    word is generated instead.
    """

    def __init__(
        self,
        providers: tuple[WordProvider, ...] = WORD_PROVIDERS,
        *,
        timeout: float = WORD_FETCH_TIMEOUT,
        words: tuple[str, ...] = LOCAL_WORDS,
        rng: random.Random | None = None,
    ) -> None:
        self.providers = providers
        self.timeout = timeout
        self.words = words
        self.rng = rng or random.SystemRandom()
        self.cursor = 0

    def resolve(self, max_length: int) -> str:
        """Return a word of at most *max_length* characters.

        Never raises for ``max_length >= 1``; network and parse errors are
        logged at DEBUG level and skipped.
        """
        if max_length < 1:
            raise ValueError("Word length must be at least 1")

        for _ in range(len(self.providers)):
            provider = self.providers[self.cursor % len(self.providers)]
            self.cursor += 1

            word = self._fetch(provider, max_length)
            if word and len(word) <= max_length:
                return word
            if word:
                logger.debug(
                    "%s returned %r (longer than %d), trying next",
                    provider.name, word, max_length,
                )

        candidates = [w for w in self.words if len(w) <= max_length]
        if candidates:
            logger.debug("All word providers failed, using local dictionary")
            return self.rng.choice(candidates)

        logger.debug("No local word fits %d characters, generating one", max_length)
        return fallback_word(max_length, self.rng)

    def _fetch(self, provider: WordProvider, length: int) -> str | None:
        # *timeout* bounds the whole attempt, not just the gap between bytes.
        deadline = monotonic() + self.timeout
        try:
            resp = requests.get(provider.url(length), stream=True, timeout=self.timeout)
            try:
                resp.raise_for_status()
                body = b""
                for chunk in resp.iter_content(chunk_size=1024):
                    body += chunk
                    if monotonic() > deadline:
                        raise requests.Timeout(
                            f"no complete response within {self.timeout}s"
                        )
            finally:
                resp.close()
            data = json.loads(body)
        except (requests.RequestException, ValueError) as exc:
            logger.debug("%s failed, trying next: %s", provider.name, exc)
            return None

        word = provider.parse(data, self.rng)
        if word is None:
            logger.debug("%s returned an unexpected body, trying next", provider.name)
        return word


_default_source = WordSource()


# ── Caesar cipher ──────────────────────────────────────────────────────────


def _check_shift(shift: int) -> None:
    if not 1 <= shift <= 25:
        raise ValueError("Caesar shift must be between 1 and 25")


def caesar_cipher(text: str, shift: int) -> str:
    """Shift each ASCII letter of *text* forward by *shift*, preserving case.

    Anything that is not an ASCII letter passes through unchanged.
    """
    _check_shift(shift)
    table = str.maketrans(
        LOWERCASE + UPPERCASE,
        LOWERCASE[shift:] + LOWERCASE[:shift] + UPPERCASE[shift:] + UPPERCASE[:shift],
    )
    return text.translate(table)


def caesar_decipher(text: str, shift: int) -> str:
    """Undo :func:`caesar_cipher` with the same *shift*."""
    _check_shift(shift)
    return caesar_cipher(text, 26 - shift)


# ── Password composition ───────────────────────────────────────────────────


def apply_word_case(word: str, case: WordCase, rng: random.Random) -> str:
    if case is WordCase.LOWER:
        return word.lower()
    if case is WordCase.UPPER:
        return word.upper()
    return "".join(c.upper() if rng.random() > 0.5 else c.lower() for c in word)


def _check_length(length: int) -> None:
    if not MIN_LENGTH <= length <= MAX_LENGTH:
        raise ValueError(
            f"Password length must be between {MIN_LENGTH} and {MAX_LENGTH}"
        )


def generate_password(
    length: int = DEFAULT_LENGTH,
    options: GenerationOptions | None = None,
    word_case: WordCase | str = WordCase.LOWER,
    *,
    source: WordSource | None = None,
    rng: random.Random | None = None,
) -> str:
    """Generate a random password, optionally built around a dictionary word.

    With ``options.word`` enabled, a word of at most 8 characters (or of at
    most *length* characters when no character class is enabled) is resolved
    through *source*, re-cased according to *word_case*, and spliced into
    random filler at a random offset.  Returns an empty string when nothing
    is enabled.
    """
    _check_length(length)
    options = options or GenerationOptions()
    word_case = WordCase(word_case)
    source = source or _default_source
    rng = rng or source.rng

    charset = build_charset(options)

    if not options.word:
        return random_chars(length, charset, rng)

    if not charset:
        word = source.resolve(length)
        return apply_word_case(word, word_case, rng)[:length]

    word = apply_word_case(source.resolve(min(length, MAX_WORD_LENGTH)), word_case, rng)
    remaining = length - len(word)
    if remaining <= 0:
        return word[:length]

    return splice(random_chars(remaining, charset, rng), word, rng)


def generate_cipher_password(
    length: int,
    config: CipherConfig,
    options: GenerationOptions | None = None,
    *,
    rng: random.Random | None = None,
) -> str:
    """Embed the Caesar-shifted phrase of *config* in a random password.

    The ``word`` flag of *options* is ignored.  Without any character class,
    or when the ciphertext already fills *length*, the ciphertext is returned
    truncated to *length*.
    """
    _check_length(length)
    options = options or GenerationOptions()
    rng = rng or random.SystemRandom()

    ciphertext = caesar_cipher(config.plaintext, config.shift)
    charset = build_charset(options)

    if charset and len(ciphertext) < length:
        return splice(random_chars(length - len(ciphertext), charset, rng), ciphertext, rng)
    return ciphertext[:length]
