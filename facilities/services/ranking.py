from __future__ import annotations

from typing import Any, Iterable, Optional

from facilities.services.filters import BUDGET_HEADROOM


def _field(row: Any, name: str):
    if isinstance(row, dict):
        return row.get(name)
    return getattr(row, name, None)


def within_budget(row: Any, budget: Optional[float], headroom: float = 1.0) -> bool:
    """True when the row's estimated cost fits ``budget * headroom``.

    Without a budget every row fits.
    """
    if budget is None:
        return True
    cost = _field(row, 'estimated_cost')
    return cost is not None and cost <= budget * headroom


def rank_facilities(facilities: Iterable[Any], budget: Optional[float], *,
                    headroom: float = BUDGET_HEADROOM) -> list:
    """Order facilities for display: affordable first, then by rating.

    The sort is stable, so rows tied on both keys keep their incoming order.
    Returns a new list; ``facilities`` is left untouched.
    """
    return sorted(
        facilities,
        key=lambda row: (
            not within_budget(row, budget, headroom),
            -(_field(row, 'rating') or 0),
        ),
    )
