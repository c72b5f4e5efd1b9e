"""
Secure entropy source:
Bounded uniform integers from the operating-system CSPRNG.
"""

from __future__ import annotations

import logging
import secrets

from .errors import EntropySourceError

logger = logging.getLogger(__name__)


class SystemEntropySource:
    """
    Thin wrapper over secrets.randbelow.

    Holds no state, so a single instance can be shared between threads.
    Any object with a compatible `randbelow(n)` can stand in for it.
    """

    def randbelow(self, upper: int) -> int:
        try:
            return secrets.randbelow(upper)
        except (OSError, NotImplementedError) as exc:
            logger.debug("secrets.randbelow(%d) failed: %r", upper, exc)
            raise EntropySourceError(f"Secure random source failed: {exc}") from exc


DEFAULT_SOURCE = SystemEntropySource()


def randbelow(upper: int, source=None) -> int:
    """
    Return a uniformly distributed integer in [0, upper) from `source`.

    An out-of-range value from the source is treated as a source failure.
    """
    if upper <= 0:
        raise ValueError(f"upper must be positive, got {upper}")

    src = source or DEFAULT_SOURCE
    value = src.randbelow(upper)
    if not 0 <= value < upper:
        raise EntropySourceError(
            f"Entropy source returned {value}, expected a value below {upper}."
        )
    return value
