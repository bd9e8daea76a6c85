"""
Generic filtered read over a model.

``select`` is the one place that turns filter values into ORM predicates.
Search terms are always passed as bound parameters via ``Q`` lookups and
never spliced into a filter string.
"""
from __future__ import annotations

from functools import reduce
from operator import or_
from typing import Any, Iterable, Mapping, Optional, Sequence

from django.db.models import Model, Q, QuerySet


def ilike_any(fields: Iterable[str], term: str) -> Q:
    """Case-insensitive ``term`` substring match OR-ed across ``fields``."""
    return reduce(or_, (Q(**{f'{name}__icontains': term}) for name in fields))


def select(model: type[Model], *,
           eq: Optional[Mapping[str, Any]] = None,
           lte: Optional[Mapping[str, Any]] = None,
           in_: Optional[Mapping[str, Sequence[Any]]] = None,
           ilike_or: Optional[tuple[Sequence[str], str]] = None,
           order_by: Sequence[str] = (),
           offset: int = 0,
           limit: Optional[int] = None) -> QuerySet:
    """Return a lazy queryset for ``model`` restricted by the given filters.

    ``ilike_or`` is a ``(fields, term)`` pair.  ``offset``/``limit`` slice the
    ordered result, i.e. rows ``offset .. offset + limit - 1``.
    """
    qs = model.objects.all()
    for name, value in (eq or {}).items():
        qs = qs.filter(**{name: value})
    for name, value in (lte or {}).items():
        qs = qs.filter(**{f'{name}__lte': value})
    for name, values in (in_ or {}).items():
        qs = qs.filter(**{f'{name}__in': list(values)})
    if ilike_or:
        fields, term = ilike_or
        qs = qs.filter(ilike_any(fields, term))
    if order_by:
        qs = qs.order_by(*order_by)
    if limit is not None:
        return qs[offset:offset + limit]
    if offset:
        return qs[offset:]
    return qs
