"""
Configuration for the secure password generator.
"""

from dataclasses import dataclass

from .alphabet import CharacterClass
from .generator import GenerationRequest


@dataclass
class GeneratorConfig:
    # Desired password length in characters.
    password_length: int = 12

    # Range offered by the CLI and the GUI spin box.
    # The core itself accepts any length >= 0.
    min_length: int = 4
    max_length: int = 128

    # Character classes included in the alphabet.
    include_lowercase: bool = True
    include_uppercase: bool = True
    include_digits: bool = True
    include_symbols: bool = True

    def selected_classes(self) -> frozenset[CharacterClass]:
        toggles = (
            (self.include_lowercase, CharacterClass.LOWERCASE),
            (self.include_uppercase, CharacterClass.UPPERCASE),
            (self.include_digits, CharacterClass.DIGIT),
            (self.include_symbols, CharacterClass.SYMBOL),
        )
        return frozenset(cls for enabled, cls in toggles if enabled)

    def to_request(self) -> GenerationRequest:
        return GenerationRequest(
            length=self.password_length,
            classes=self.selected_classes(),
        )


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = GeneratorConfig()
