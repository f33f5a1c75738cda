"""Score (0-100) and improvement suggestions for a resume analysis."""

import math
import re
import warnings
from typing import Any, List, Sequence

from resume_insight.errors import ScoreCoercionWarning
from resume_insight.schemas.analysis import ContactInfo
from resume_insight.utils.logger import get_logger

logger = get_logger(__name__)

SCORE_MIN = 0
SCORE_MAX = 100

# Points per item found
WEIGHT_SKILL = 5
WEIGHT_EXPERIENCE = 3
WEIGHT_EDUCATION = 2
WEIGHT_CONTACT_FIELD = 5

SUGGEST_MORE_SKILLS = "Consider adding more technical skills to your resume"
SUGGEST_MORE_EXPERIENCE = "Include more detailed work experience descriptions"
SUGGEST_EMAIL = "Add your email address to the resume"
SUGGEST_PHONE = "Include your phone number for better contact"
SUGGEST_RESTRUCTURE = "Consider restructuring your resume for better impact"

MIN_SKILLS = 5
MIN_EXPERIENCE = 3
RESTRUCTURE_BELOW = 50

# "85", "85.5", "85%", "85/100", " 85 / 100 "
_NUMERIC_SCORE = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s*(?:%|/\s*100)?\s*$")


def calculate_score(
    skills: Sequence[str],
    experience: Sequence[str],
    education: Sequence[str],
    contact: ContactInfo,
) -> int:
    """Weighted item count, capped at 100."""
    score = (
        WEIGHT_SKILL * len(skills)
        + WEIGHT_EXPERIENCE * len(experience)
        + WEIGHT_EDUCATION * len(education)
        + WEIGHT_CONTACT_FIELD * contact.filled_count()
    )
    return max(SCORE_MIN, min(SCORE_MAX, score))


def generate_suggestions(
    skills: Sequence[str],
    experience: Sequence[str],
    contact: ContactInfo,
    score: int,
) -> List[str]:
    """Fixed-order rule list; every rule that fires adds its suggestion."""
    suggestions: List[str] = []
    if len(skills) < MIN_SKILLS:
        suggestions.append(SUGGEST_MORE_SKILLS)
    if len(experience) < MIN_EXPERIENCE:
        suggestions.append(SUGGEST_MORE_EXPERIENCE)
    if not contact.email:
        suggestions.append(SUGGEST_EMAIL)
    if not contact.phone:
        suggestions.append(SUGGEST_PHONE)
    if score < RESTRUCTURE_BELOW:
        suggestions.append(SUGGEST_RESTRUCTURE)
    return suggestions


def _warn(message: str) -> None:
    logger.warning(message)
    warnings.warn(message, ScoreCoercionWarning, stacklevel=3)


def coerce_score(value: Any, fallback: int = 0) -> int:
    """
    Coerce a score from an untrusted source to an int in [0, 100].
    Numbers are rounded; numeric strings ("85", "85%", "85/100") parsed.
    Anything else yields `fallback`. Emits ScoreCoercionWarning whenever the value was
    not already an in-range int; never raises.
    """
    if isinstance(value, bool):
        value = None
    number: Any = None
    if isinstance(value, int):
        number = value
    elif isinstance(value, float) and math.isfinite(value):
        number = value
    elif isinstance(value, str):
        m = _NUMERIC_SCORE.match(value)
        if m:
            number = float(m.group(1))

    if number is None:
        _warn(f"Score {value!r} is not numeric; using fallback {fallback}")
        return max(SCORE_MIN, min(SCORE_MAX, int(fallback)))

    result = int(round(number))
    clamped = max(SCORE_MIN, min(SCORE_MAX, result))
    if clamped != result:
        _warn(f"Score {value!r} out of range; clamped to {clamped}")
    elif not isinstance(value, int):
        _warn(f"Score {value!r} coerced to {clamped}")
    return clamped
