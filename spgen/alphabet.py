"""
Character classes and alphabet construction.

The four class sets are disjoint, so concatenating them never
introduces duplicates.
"""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import Iterable

from .errors import NoClassSelected

logger = logging.getLogger(__name__)


class CharacterClass(str, Enum):
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    DIGIT = "digit"
    SYMBOL = "symbol"


LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE = LOWERCASE.upper()
DIGITS = "0123456789"
SYMBOLS = "!@#$%^&*()_+-=[]{}|;':,.<>?"

CHARSETS = MappingProxyType(
    {
        CharacterClass.LOWERCASE: LOWERCASE,
        CharacterClass.UPPERCASE: UPPERCASE,
        CharacterClass.DIGIT: DIGITS,
        CharacterClass.SYMBOL: SYMBOLS,
    }
)

# Concatenation order, independent of the order classes are supplied in.
CANONICAL_ORDER: tuple[CharacterClass, ...] = (
    CharacterClass.LOWERCASE,
    CharacterClass.UPPERCASE,
    CharacterClass.DIGIT,
    CharacterClass.SYMBOL,
)


def coerce_classes(classes: Iterable[CharacterClass]) -> frozenset[CharacterClass]:
    """
    Normalise a collection of classes or their string values.

    A bare string is rejected rather than iterated character by character.
    Unknown values raise ValueError.
    """
    if isinstance(classes, str):
        raise TypeError(
            f"Expected a collection of character classes, got the string {classes!r}."
        )
    return frozenset(CharacterClass(c) for c in classes)


def build_alphabet(classes: Iterable[CharacterClass]) -> str:
    """
    Concatenate the character sets of the selected classes.

    Raises NoClassSelected when `classes` is empty.
    """
    selected = coerce_classes(classes)
    if not selected:
        raise NoClassSelected()

    ordered = [c for c in CANONICAL_ORDER if c in selected]
    alphabet = "".join(CHARSETS[c] for c in ordered)
    logger.debug(
        "Built alphabet of %d characters from %s",
        len(alphabet),
        ", ".join(c.value for c in ordered),
    )
    return alphabet
