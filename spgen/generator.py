"""
Password generation: draw characters uniformly from an alphabet.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, Sequence

from .alphabet import CharacterClass, build_alphabet, coerce_classes
from .entropy import randbelow
from .errors import EmptyAlphabet, InvalidLength

logger = logging.getLogger(__name__)


def _check_length(length: int) -> None:
    # bool is an int subclass; True must not mean "one character".
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidLength(
            f"Password length must be an integer, got {type(length).__name__}."
        )
    if length < 0:
        raise InvalidLength(f"Password length must be >= 0, got {length}.")


def generate_password(
    length: int,
    alphabet: Sequence[str],
    source=None,
) -> str:
    """
    Build a password of `length` characters drawn from `alphabet`.

    Draws are independent and with replacement, so characters may repeat.
    A zero length always yields "" (even for an empty alphabet).
    EntropySourceError from the source propagates unchanged.
    """
    _check_length(length)
    if length == 0:
        return ""
    if not alphabet:
        raise EmptyAlphabet()

    size = len(alphabet)
    password_chars: list[str] = [
        alphabet[randbelow(size, source)] for _ in range(length)
    ]

    logger.debug("Generated %d-character password from %d symbols", length, size)
    return "".join(password_chars)


@dataclass(frozen=True)
class GenerationRequest:
    """
    One user action: a target length plus the selected character classes.
    """

    length: int
    classes: FrozenSet[CharacterClass] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        _check_length(self.length)
        object.__setattr__(self, "classes", coerce_classes(self.classes))


@dataclass
class GenerationMeta:
    """
    Result of one generation together with what produced it.
    """

    password: str
    alphabet_size: int
    request: GenerationRequest


def generate_with_meta(
    request: GenerationRequest,
    source=None,
) -> GenerationMeta:
    """
    Full pipeline:
    - Build the alphabet fresh from the request's classes.
    - Draw the password from it.
    """
    alphabet = build_alphabet(request.classes)
    password = generate_password(request.length, alphabet, source)
    return GenerationMeta(
        password=password,
        alphabet_size=len(alphabet),
        request=request,
    )


def generate_for_request(
    request: GenerationRequest,
    source=None,
) -> str:
    return generate_with_meta(request, source).password
