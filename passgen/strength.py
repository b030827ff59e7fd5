"""
passgen.strength

Five-point password strength classifier:
- score_points(password): number of heuristic conditions met (0-5)
- points_to_strength(points): map a point score to a StrengthLevel
- classify(password): StrengthLevel for a password (never raises)
"""

import enum

# Only these three count as "special" here. The generator draws from "!?#".
CHECKED_SPECIAL_CHARS = "?!@"


@enum.unique
class StrengthLevel(enum.IntEnum):
    VERY_WEAK = 0
    WEAK = 1
    MEDIUM = 2
    STRONG = 3
    VERY_STRONG = 4

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", " ")

    def __str__(self) -> str:
        return self.label


_POINTS_TO_STRENGTH = (
    StrengthLevel.VERY_WEAK,  # 0
    StrengthLevel.VERY_WEAK,  # 1
    StrengthLevel.WEAK,
    StrengthLevel.MEDIUM,
    StrengthLevel.STRONG,
    StrengthLevel.VERY_STRONG,
)


def points_to_strength(points: int) -> StrengthLevel:
    if not 0 <= points < len(_POINTS_TO_STRENGTH):
        raise ValueError(f"points must be between 0 and 5, got {points}")
    return _POINTS_TO_STRENGTH[points]


def score_points(password: str) -> int:
    """
    Award one point per condition met:
    longer than 10 chars, has lowercase, has uppercase, has a digit,
    has one of CHECKED_SPECIAL_CHARS.
    """
    if not password:
        return 0

    score = 0
    if len(password) > 10:
        score += 1
    if any(c.islower() for c in password):
        score += 1
    if any(c.isupper() for c in password):
        score += 1
    if any(c.isdigit() for c in password):
        score += 1
    if any(c in CHECKED_SPECIAL_CHARS for c in password):
        score += 1
    return score


def classify(password: str) -> StrengthLevel:
    return points_to_strength(score_points(password))
