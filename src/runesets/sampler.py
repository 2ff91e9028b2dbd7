"""Uniform sampling of code points from a character set.

Every draw goes through a Sampler, which owns its random.Random and a lock
serializing access to it. The module-level helpers use one default
instance, seeded from the clock when this module is first imported.
"""

import logging
import random
import threading
import time
from collections.abc import Sequence

from runesets.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def _validate_arguments(length: int, charset: Sequence[str]) -> None:
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidArgumentError(
            f"length must be an int, got {type(length).__name__}"
        )
    if length < 0:
        raise InvalidArgumentError("negative length")
    if len(charset) == 0:
        raise InvalidArgumentError("empty charset")


class Sampler:
    def __init__(
        self, seed: int | None = None, rng: random.Random | None = None
    ):
        if rng is not None and seed is not None:
            raise ValueError("pass either seed or rng, not both")
        if rng is None:
            if seed is None:
                seed = time.time_ns()
            logger.debug("seeding sampler with %d", seed)
            rng = random.Random(seed)
        self._rng = rng
        self._lock = threading.Lock()

    def random_runes(self, length: int, charset: Sequence[str]) -> list[str]:
        """Return length code points drawn uniformly, with replacement.

        Raises InvalidArgumentError for a negative length or an empty
        charset, before anything is drawn.
        """
        _validate_arguments(length, charset)
        size = len(charset)
        with self._lock:
            return [charset[self._rng.randrange(size)] for _ in range(length)]

    def random_string(self, length: int, charset: Sequence[str]) -> str:
        return "".join(self.random_runes(length, charset))


_DEFAULT_SAMPLER = Sampler()


def default_sampler() -> Sampler:
    return _DEFAULT_SAMPLER


def random_runes(length: int, charset: Sequence[str]) -> list[str]:
    return _DEFAULT_SAMPLER.random_runes(length, charset)


def random_string(length: int, charset: Sequence[str]) -> str:
    return _DEFAULT_SAMPLER.random_string(length, charset)
