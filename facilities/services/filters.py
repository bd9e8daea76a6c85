"""
Translate raw query parameters into a facility filter.

Query parameters always arrive as strings (or not at all).  Malformed
numbers are never an error here: they are treated as if the parameter
was not sent, falling back to the default where one exists.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Mapping, Optional

BUDGET_HEADROOM = 1.2
DEFAULT_LIMIT = 20
MAX_LIMIT = 100
# Largest row index or id a 64-bit integer column can address
MAX_DB_INT = 2 ** 63 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)
_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?", re.ASCII)


def parse_int(value: Optional[str], default: Optional[int] = None) -> Optional[int]:
    """Parse ``value`` as an integer, returning ``default`` when it is not one."""
    if value is None:
        return default
    text = str(value).strip()
    if not _INT_RE.fullmatch(text):
        return default
    return int(text)


def parse_number(value: Optional[str], default: Optional[float] = None) -> Optional[float]:
    """Parse ``value`` as a finite number, returning ``default`` otherwise."""
    if value is None:
        return default
    text = str(value).strip()
    if not _NUMBER_RE.fullmatch(text):
        return default
    number = float(text)
    if not math.isfinite(number):
        return default
    return number


def cost_ceiling(budget: Optional[float], headroom: float = BUDGET_HEADROOM) -> Optional[float]:
    """Inclusive upper bound on ``estimated_cost`` for a stated budget."""
    if budget is None:
        return None
    return min(budget * headroom, MAX_DB_INT)


def split_csv(value: Optional[str]) -> list[str]:
    if not value:
        return []
    return [part.strip() for part in value.split(',') if part.strip()]


def clamp_limit(limit: Optional[int], default: int = DEFAULT_LIMIT, maximum: int = MAX_LIMIT) -> int:
    if limit is None or limit < 1:
        return default
    return min(limit, maximum)


@dataclass(frozen=True)
class FacilityFilter:
    """Normalized filter, sort and pagination for a facility listing."""
    treatment: Optional[str] = None
    budget: Optional[float] = None
    max_cost: Optional[float] = None
    regions: tuple[str, ...] = field(default_factory=tuple)
    country: Optional[str] = None
    limit: int = DEFAULT_LIMIT
    offset: int = 0

    @property
    def range_end(self) -> int:
        """Last row index of the page, inclusive."""
        return self.offset + self.limit - 1


def build_facility_filter(params: Mapping[str, str], *, default_limit: int = DEFAULT_LIMIT,
                          max_limit: int = MAX_LIMIT, headroom: float = BUDGET_HEADROOM) -> FacilityFilter:
    """Build a :class:`FacilityFilter` from request parameters.

    Accepted parameters:
      - treatment: substring searched in name/specialty/description
      - budget: stated budget; rows above ``budget * headroom`` are excluded
      - region: comma separated region slugs
      - country: exact country
      - limit, offset: pagination (``limit`` capped at ``max_limit``)
    """
    treatment = (params.get('treatment') or '').strip() or None

    budget = parse_number(params.get('budget'))
    max_cost = cost_ceiling(budget, headroom)

    country = (params.get('country') or '').strip() or None

    limit = clamp_limit(parse_int(params.get('limit')), default_limit, max_limit)
    offset = parse_int(params.get('offset'), 0)
    # Offsets beyond the last addressable row still give an empty page
    offset = min(max(offset, 0), MAX_DB_INT - limit)

    return FacilityFilter(
        treatment=treatment,
        budget=budget,
        max_cost=max_cost,
        regions=tuple(split_csv(params.get('region'))),
        country=country,
        limit=limit,
        offset=offset,
    )
