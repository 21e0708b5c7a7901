# Configuration
# (resolved generation parameters, config file)
#

import configparser
import enum
from pathlib import Path
from typing import NamedTuple, Optional

DATA_DIR = Path('~/.memphrase')
DEFAULT_CONFIG_FILE = DATA_DIR / 'memphrase.conf'

# Appended when --suffix is given without a value
DEFAULT_SUFFIX = 'Q1!'


class Unit(enum.Enum):
    WORD = 'word'
    SYLLABLE = 'syllable'


class Tier(enum.Enum):
    STANDARD = 'standard'   # ~80 bits
    LONG = 'long'           # ~128 bits


# Number of chunks drawn for each (unit, tier)
CHUNK_COUNTS = {
    (Unit.WORD, Tier.STANDARD): 5,
    (Unit.WORD, Tier.LONG): 8,
    (Unit.SYLLABLE, Tier.STANDARD): 10,
    (Unit.SYLLABLE, Tier.LONG): 16,
}

# Summed chunk length must exceed this, otherwise a plain alphabetic
# bruteforce would be faster than guessing the chunks.
MIN_LENGTH_FLOORS = {
    Tier.STANDARD: 17,
    Tier.LONG: 27,
}


class ConfigurationError(ValueError):

    def __init__(self, msg):
        ValueError.__init__(self, msg)


def chunk_count(unit: Unit, tier: Tier) -> int:
    return CHUNK_COUNTS[(unit, tier)]


def min_length_floor(tier: Tier) -> int:
    return MIN_LENGTH_FLOORS[tier]


def default_separator(unit: Unit) -> str:
    return ' ' if unit == Unit.WORD else ''


class Configuration(NamedTuple):

    """Generation parameters, read-only once resolved."""

    unit: Unit = Unit.WORD
    tier: Tier = Tier.STANDARD
    separator: str = ' '
    suffix: str = ''
    quiet: bool = False

    @property
    def chunk_count(self) -> int:
        return chunk_count(self.unit, self.tier)

    @property
    def min_length_floor(self) -> int:
        return min_length_floor(self.tier)


def resolve(long: bool = False, syll: bool = False,
            sep: Optional[str] = None, suffix: str = '',
            quiet: bool = False) -> Configuration:
    """Map command line flags to a Configuration.

    :param long:   Select the long tier (default: standard)
    :param syll:   Use syllables instead of words
    :param sep:    Separator, None selects the default for the unit
    :param suffix: Appended verbatim, empty for no suffix
    :param quiet:  Do not print the passphrase
    :returns: The configuration.

    """
    unit = Unit.SYLLABLE if syll else Unit.WORD
    tier = Tier.LONG if long else Tier.STANDARD
    if sep is None:
        sep = default_separator(unit)
    return Configuration(unit=unit, tier=tier, separator=sep,
                         suffix=suffix or '', quiet=bool(quiet))


def check_pool(config: Configuration, pool) -> None:
    """Verify that `pool` can satisfy `config`.

    :raises ConfigurationError: Pool too small for sampling without
                                replacement, or its tokens too short
                                to ever exceed the length floor.

    """
    count = config.chunk_count
    if count > len(pool):
        raise ConfigurationError(
            f"Cannot draw {count} distinct {config.unit.value}s "
            f"from a pool of {len(pool)}.")
    longest = sorted((len(token) for token in pool), reverse=True)[:count]
    if sum(longest) <= config.min_length_floor:
        raise ConfigurationError(
            f"Tokens in the pool are too short, {count} {config.unit.value}s "
            f"cannot exceed {config.min_length_floor} characters.")


class Settings:

    """Defaults for command line flags, loaded from INI config file.

    Example::

        [memphrase]
        long = yes
        sep = -
        suffix = Q1!

    """

    BOOL_KEYS = ('long', 'syll', 'quiet')
    STR_KEYS = ('sep', 'suffix', 'wordlist')

    def __init__(self, config_file=None):
        self._values = {}
        if config_file is not None:
            self.load(config_file)

    def load(self, config_file):
        config_file = Path(config_file).expanduser()
        if not config_file.exists():
            return
        config = configparser.ConfigParser(interpolation=None)
        try:
            config.read(config_file, encoding='utf-8')
        except configparser.Error as e:
            raise ConfigurationError(f"Invalid config {str(config_file)!r}: {e}")
        for section in config.sections():
            if section != 'memphrase':
                print(f"WARNING: unknown section {section!r} in config {str(config_file)!r}")
                continue
            section = config[section]
            for key in section:
                if key in self.BOOL_KEYS:
                    try:
                        self._values[key] = section.getboolean(key)
                    except ValueError:
                        raise ConfigurationError(
                            f"Invalid boolean for {key!r} in config {str(config_file)!r}: "
                            f"{section[key]!r}")
                elif key in self.STR_KEYS:
                    self._values[key] = section[key]
                else:
                    print(f"WARNING: unknown key [{section.name!r}] {key!r} in config {str(config_file)!r}")

    def get(self, key, default=None):
        return self._values.get(key, default)

    def defaults(self) -> dict:
        """Return values usable as argparse defaults."""
        return dict(self._values)
