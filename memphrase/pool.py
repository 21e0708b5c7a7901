# Pool
# (word and syllable lists)
#

import functools
import logging
from pathlib import Path

from .config import Unit
from .stringutil import split_tokens

log = logging.getLogger(__name__)

# Longer words are left out of the word pool
MAX_WORD_LENGTH = 7

# Prefer system wordlist, fallback to bundled one
# See: https://en.wikipedia.org/wiki/Words_(Unix)
WORDLIST_SYSTEM_PATH = Path('/usr/share/dict/words')

DATA_PATH = Path(__file__).parent / 'data'
WORDS_PATH = DATA_PATH / 'words.txt'
SYLLABLES_PATH = DATA_PATH / 'syllables.txt'


class PoolError(ValueError):

    def __init__(self, msg):
        ValueError.__init__(self, msg)


def make_pool(text: str, name='pool', max_length=None) -> tuple:
    """Build a pool of tokens from whitespace-delimited `text`.

    Tokens are lowercased, non-alphabetic tokens (e.g. possessives
    like "aaron's") are dropped, as are tokens longer than `max_length`.
    Repeated tokens are kept only once, in order of first occurrence.

    :raises PoolError: No usable token found.

    """
    tokens = []
    seen = set()
    for token in split_tokens(text):
        if not token.isalpha() or token in seen:
            continue
        if max_length is not None and len(token) > max_length:
            continue
        seen.add(token)
        tokens.append(token)
    if not tokens:
        raise PoolError(f"No usable tokens in {name}.")
    log.debug("Loaded %s: %d tokens", name, len(tokens))
    return tuple(tokens)


def read_text(path) -> str:
    """Read UTF-8 text file.

    :raises FileNotFoundError: No such file.
    :raises PoolError: The file is unreadable or not UTF-8.

    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except FileNotFoundError:
        raise
    except OSError as e:
        raise PoolError(f"Unable to read word list {str(path)!r}: {e.strerror}")
    except UnicodeDecodeError as e:
        raise PoolError(f"Word list {str(path)!r} is not UTF-8: {e.reason} "
                        f"at byte {e.start}")


def load_pool_file(path, max_length=None) -> tuple:
    """Load a pool from a custom word list file."""
    path = Path(path).expanduser()
    try:
        content = read_text(path)
    except FileNotFoundError:
        raise PoolError(f"Word list {str(path)!r} not found")
    return make_pool(content, name=str(path), max_length=max_length)


@functools.lru_cache(maxsize=None)
def load_syllables() -> tuple:
    """Load and return the syllable pool."""
    return make_pool(read_text(SYLLABLES_PATH), name='syllables')


@functools.lru_cache(maxsize=None)
def load_bundled_words() -> tuple:
    """Load and return the word list shipped with the package."""
    return make_pool(read_text(WORDS_PATH), 'bundled words', MAX_WORD_LENGTH)


@functools.lru_cache(maxsize=None)
def load_words() -> tuple:
    """Load and return the word pool."""
    # Try system dict/words
    try:
        content = read_text(WORDLIST_SYSTEM_PATH)
        return make_pool(content, str(WORDLIST_SYSTEM_PATH), MAX_WORD_LENGTH)
    except FileNotFoundError:
        pass
    except PoolError as e:
        log.warning("%s Using bundled words.", e)
    return load_bundled_words()


def load_pool(unit, wordlist=None) -> tuple:
    """Select the pool for `unit`.

    A custom `wordlist` file replaces the word pool. Syllables always
    come from the bundled list.

    """
    if unit == Unit.SYLLABLE:
        return load_syllables()
    if wordlist:
        return load_pool_file(wordlist, MAX_WORD_LENGTH)
    return load_words()
