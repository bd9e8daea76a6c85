"""
Quiz results endpoint.

The quiz redirects to the results page with its answers in the query
string; this endpoint turns those answers into a ranked facility list.
"""
from __future__ import annotations

import logging

from django.conf import settings
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from ..exceptions import RepositoryFailure
from ..serializers.facility import RankedFacilitySerializer
from ..services.filters import FacilityFilter, clamp_limit, cost_ceiling, parse_int, parse_number, split_csv
from ..services.ranking import rank_facilities
from ..services.repository import get_repository
from .facilities import with_cache_hint

logger = logging.getLogger(__name__)


@api_view(['GET'])
@permission_classes([AllowAny])
def quiz_results(request):
    """Facilities matching quiz answers, affordable ones first.

    Query params:
      - treatment: search term
      - budget: stated budget (default from ``RESULTS_DEFAULT_BUDGET``)
      - location: comma separated regions
      - limit: max rows (default 20, capped)
    """
    params = request.query_params
    budget = parse_number(params.get('budget'), settings.RESULTS_DEFAULT_BUDGET)
    flt = FacilityFilter(
        treatment=(params.get('treatment') or '').strip() or None,
        budget=budget,
        max_cost=cost_ceiling(budget, settings.BUDGET_HEADROOM),
        regions=tuple(split_csv(params.get('location'))),
        limit=clamp_limit(parse_int(params.get('limit')), settings.FACILITY_DEFAULT_LIMIT, settings.FACILITY_MAX_LIMIT),
    )
    try:
        rows = get_repository().list_facilities(flt)
    except Exception as exc:
        logger.error("Error fetching quiz results: %r", exc)
        raise RepositoryFailure('Failed to fetch facilities') from exc

    ranked = rank_facilities(rows, budget, headroom=settings.BUDGET_HEADROOM)
    data = RankedFacilitySerializer(ranked, many=True, context={'budget': budget}).data
    payload = {'facilities': data, 'count': len(data), 'budget': budget}
    return with_cache_hint(Response(payload), settings.LIST_CACHE_SECONDS)
