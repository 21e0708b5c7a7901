# generator
# (random passphrase generator)
#

import logging
from random import SystemRandom

from .config import Configuration, check_pool

log = logging.getLogger(__name__)
random = SystemRandom()


class GenerationError(RuntimeError):

    def __init__(self, msg):
        RuntimeError.__init__(self, msg)


def draw_chunks(pool, count: int, rng=random) -> list:
    """Draw `count` distinct pool entries, in draw order."""
    return rng.sample(pool, count)


def chunks_length(chunks) -> int:
    """Total length of chunks, not counting separators and suffix."""
    return sum(len(chunk) for chunk in chunks)


def join_chunks(chunks, separator: str, suffix: str = '') -> str:
    result = separator.join(chunks)
    if suffix:
        result += separator + suffix
    return result


def generate(pool, config: Configuration, rng=None, max_attempts=None) -> str:
    """Generate random passphrase from `pool`.

    Chunks are drawn without replacement. Draws whose total length
    doesn't exceed the length floor of `config` are thrown away
    and drawn again from the full pool.

    :param pool: Sequence of tokens (words or syllables)
    :param config: Resolved configuration
    :param rng: Random source with `sample(population, k)` method.
                Default is `SystemRandom`.
    :param max_attempts: Give up after this many draws. Default is no limit.
    :returns: The passphrase.
    :raises ConfigurationError: Pool can't satisfy the configuration.
    :raises GenerationError: `max_attempts` exhausted.

    """
    check_pool(config, pool)
    if rng is None:
        rng = random
    count = config.chunk_count
    min_length = config.min_length_floor
    attempt = 0
    while True:
        attempt += 1
        chunks = draw_chunks(pool, count, rng)
        if chunks_length(chunks) > min_length:
            break
        log.info("passphrase too short, trying again...")
        if max_attempts is not None and attempt >= max_attempts:
            raise GenerationError(
                f"No passphrase longer than {min_length} characters "
                f"in {attempt} attempts.")
    return join_chunks(chunks, config.separator, config.suffix)
