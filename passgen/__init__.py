"""passgen: check password strength and generate random passwords."""

from .generator import (
    EmptyCharacterSetError,
    GenerationConfig,
    GenerationError,
    RandomSource,
    SecretsRandomSource,
    character_set,
    generate,
    generate_default,
)
from .strength import StrengthLevel, classify

__version__ = "1.0.0"

__all__ = [
    "EmptyCharacterSetError",
    "GenerationConfig",
    "GenerationError",
    "RandomSource",
    "SecretsRandomSource",
    "StrengthLevel",
    "character_set",
    "classify",
    "generate",
    "generate_default",
]
