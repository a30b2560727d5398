"""Which open feedback periods a user can still answer"""
from typing import Iterable, List, TypeVar

P = TypeVar("P")


def filter_available_periods(
    periods: Iterable[P],
    submitted_departments: Iterable[str],
    user_department: str,
) -> List[P]:
    """
    Keep the periods a user may still give feedback on.

    A period is dropped when it targets the user's own department or a
    department the user has already submitted feedback for. Input order is
    preserved; callers pass periods already sorted by end date.

    Args:
        periods: Active, unexpired periods (anything with a `department`)
        submitted_departments: Target departments the user already answered
        user_department: The user's own department

    Returns:
        The remaining periods, in input order
    """
    excluded = set(submitted_departments)
    excluded.add(user_department)
    return [period for period in periods if period.department not in excluded]
