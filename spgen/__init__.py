"""
Secure random password generator package.
"""

__version__ = "1.0.0"

from .alphabet import CharacterClass, build_alphabet
from .config import GeneratorConfig, DEFAULT_CONFIG
from .errors import (
    ConfigError,
    EmptyAlphabet,
    EntropySourceError,
    InvalidLength,
    NoClassSelected,
    SpgenError,
)
from .generator import (
    GenerationMeta,
    GenerationRequest,
    generate_for_request,
    generate_password,
    generate_with_meta,
)

__all__ = [
    "__version__",
    "CharacterClass",
    "build_alphabet",
    "GeneratorConfig",
    "DEFAULT_CONFIG",
    "ConfigError",
    "EmptyAlphabet",
    "EntropySourceError",
    "InvalidLength",
    "NoClassSelected",
    "SpgenError",
    "GenerationMeta",
    "GenerationRequest",
    "generate_for_request",
    "generate_password",
    "generate_with_meta",
]
