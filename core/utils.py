import logging
from typing import Iterable, Set

logger = logging.getLogger(__name__)


def fold_skill_name(name: str) -> str:
    """Normalize a skill name for case-insensitive comparison.

    Surrounding whitespace is ignored, so " react " and "React" compare equal.
    """
    return name.strip().casefold()


def folded_skill_set(skill_names: Iterable[str]) -> Set[str]:
    """Build the lookup set used to test skill membership."""
    return {fold_skill_name(name) for name in skill_names if name and name.strip()}


def round_half_up_percentage(part: int, whole: int) -> int:
    """
    Percentage of part/whole rounded half-up (12.5 -> 13), computed in integers.

    Args:
        part: Numerator (0 <= part <= whole)
        whole: Denominator, must be positive

    Returns:
        Integer percentage in [0, 100]
    """
    if whole <= 0:
        raise ValueError(f"whole must be positive, got {whole}")
    return (part * 200 + whole) // (2 * whole)
