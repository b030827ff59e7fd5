# passgen/config.py
"""
Built-in settings for passgen.
Nothing is read from disk or the environment; these are the only defaults.
"""

from typing import Dict, Any

DEFAULTS: Dict[str, Any] = {
    "length": 16,
    "use_digits": True,
    "use_lowercase": True,
    "use_special_chars": True,
    "use_uppercase": True,
    "max_length": 255,  # largest length the CLI accepts
}

DEFAULT_LENGTH: int = DEFAULTS["length"]
MAX_LENGTH: int = DEFAULTS["max_length"]
