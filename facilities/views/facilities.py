"""
Facility listing, search and detail endpoints.

All endpoints are public and read-only.  Successful responses carry a
shared-cache hint so a CDN can serve repeated queries; error bodies are
shaped ``{"error": message}`` by :func:`facilities.exceptions.api_exception_handler`.
"""
from __future__ import annotations

import logging

from django.conf import settings
from django.utils.cache import patch_cache_control
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from ..exceptions import FacilityNotFound, InvalidIdentifier, RepositoryFailure
from ..serializers.facility import DoctorSerializer, FacilitySerializer, TreatmentSerializer
from ..services.detail import fetch_facility_detail
from ..services.filters import MAX_DB_INT, build_facility_filter, clamp_limit, parse_int
from ..services.repository import get_read_executor, get_repository

logger = logging.getLogger(__name__)


def with_cache_hint(response: Response, seconds: tuple[int, int]) -> Response:
    fresh, stale = seconds
    patch_cache_control(response, public=True, s_maxage=fresh, stale_while_revalidate=stale)
    return response


@api_view(['GET'])
@permission_classes([AllowAny])
def list_facilities(request):
    """List facilities, highest rated first.

    Query params:
      - treatment: search in name/specialty/description (case-insensitive)
      - budget: only facilities costing at most budget * 1.2
      - region: comma separated regions, e.g. ``asia,europe``
      - country: exact country
      - limit, offset: pagination (default 20/0, limit capped)
    Malformed numbers are ignored rather than rejected.
    """
    flt = build_facility_filter(
        request.query_params,
        default_limit=settings.FACILITY_DEFAULT_LIMIT,
        max_limit=settings.FACILITY_MAX_LIMIT,
        headroom=settings.BUDGET_HEADROOM,
    )
    try:
        rows = get_repository().list_facilities(flt)
    except Exception as exc:
        logger.error("Error fetching facilities: %r", exc)
        raise RepositoryFailure('Failed to fetch facilities') from exc

    data = FacilitySerializer(rows, many=True).data
    return with_cache_hint(Response({'facilities': data, 'count': len(data)}), settings.LIST_CACHE_SECONDS)


@api_view(['GET'])
@permission_classes([AllowAny])
def search_facilities(request):
    """Free-text facility search.

    Query params:
      - q: search term; empty returns no rows
      - limit: max rows (default 20, capped)
    """
    term = (request.query_params.get('q') or '').strip()
    limit = clamp_limit(
        parse_int(request.query_params.get('limit')),
        settings.FACILITY_DEFAULT_LIMIT,
        settings.FACILITY_MAX_LIMIT,
    )
    rows = []
    if term:
        try:
            rows = get_repository().search_facilities(term, limit)
        except Exception as exc:
            logger.error("Error searching facilities: %r", exc)
            raise RepositoryFailure('Failed to search facilities') from exc

    data = FacilitySerializer(rows, many=True).data
    return with_cache_hint(Response({'facilities': data, 'count': len(data)}), settings.LIST_CACHE_SECONDS)


@api_view(['GET'])
@permission_classes([AllowAny])
def facility_detail(request, facility_id: str):
    """Return one facility with its treatments and doctors."""
    pk = parse_int(facility_id)
    if pk is None:
        raise InvalidIdentifier()
    if not 0 < pk <= MAX_DB_INT:
        raise FacilityNotFound()

    detail = fetch_facility_detail(
        get_repository(), pk,
        executor=get_read_executor(),
        timeout=settings.FACILITY_READ_TIMEOUT,
    )
    payload = {
        'facility': FacilitySerializer(detail.facility).data,
        'treatments': TreatmentSerializer(detail.treatments, many=True).data,
        'doctors': DoctorSerializer(detail.doctors, many=True).data,
    }
    return with_cache_hint(Response(payload), settings.DETAIL_CACHE_SECONDS)
