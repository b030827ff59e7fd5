"""
passgen.generator
Random password generator over a configurable set of character classes.
"""

import logging
import secrets
import string
from dataclasses import dataclass
from typing import Optional, Protocol

from .config import DEFAULT_LENGTH, DEFAULTS

logger = logging.getLogger(__name__)

DIGITS = "123456789"
LOWERCASE = string.ascii_lowercase
SPECIAL_CHARS = "!?#"
UPPERCASE = string.ascii_uppercase


class GenerationError(ValueError):
    """Base class for password generation failures."""


class EmptyCharacterSetError(GenerationError):
    """Raised when no character classes are selected."""

    def __init__(self) -> None:
        super().__init__("no character classes selected, cannot generate a password")


class RandomSource(Protocol):
    def randbelow(self, n: int) -> int:
        """Return a uniformly chosen integer in [0, n)."""
        ...


class SecretsRandomSource:
    """RandomSource backed by the OS generator via the secrets module."""

    def randbelow(self, n: int) -> int:
        return secrets.randbelow(n)


@dataclass(frozen=True)
class GenerationConfig:
    length: int = DEFAULTS["length"]
    use_digits: bool = DEFAULTS["use_digits"]
    use_lowercase: bool = DEFAULTS["use_lowercase"]
    use_special_chars: bool = DEFAULTS["use_special_chars"]
    use_uppercase: bool = DEFAULTS["use_uppercase"]

    def __post_init__(self) -> None:
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise ValueError(f"length must be an int, got {self.length!r}")
        if self.length < 0:
            raise ValueError("length must be >= 0")

    @classmethod
    def with_default_length(
        cls,
        use_digits: bool,
        use_lowercase: bool,
        use_special_chars: bool,
        use_uppercase: bool,
    ) -> "GenerationConfig":
        return cls(
            length=DEFAULT_LENGTH,
            use_digits=use_digits,
            use_lowercase=use_lowercase,
            use_special_chars=use_special_chars,
            use_uppercase=use_uppercase,
        )


def character_set(config: GenerationConfig) -> str:
    """
    Join the enabled classes in a fixed order:
    digits, lowercase, special chars, uppercase.
    """
    pools = []
    if config.use_digits:
        pools.append(DIGITS)
    if config.use_lowercase:
        pools.append(LOWERCASE)
    if config.use_special_chars:
        pools.append(SPECIAL_CHARS)
    if config.use_uppercase:
        pools.append(UPPERCASE)
    return "".join(pools)


def generate(
    config: Optional[GenerationConfig] = None,
    randomness: Optional[RandomSource] = None,
) -> str:
    """
    Draw config.length characters with replacement from the configured
    character set. Raises EmptyCharacterSetError if no class is enabled.
    """
    config = config or GenerationConfig()
    randomness = randomness or SecretsRandomSource()

    all_chars = character_set(config)
    if not all_chars:
        raise EmptyCharacterSetError()

    logger.debug("generating %d chars from a set of %d", config.length, len(all_chars))
    password_chars = []
    for _ in range(config.length):
        password_chars.append(all_chars[randomness.randbelow(len(all_chars))])
    return "".join(password_chars)


def generate_default(randomness: Optional[RandomSource] = None) -> str:
    return generate(GenerationConfig(), randomness)
