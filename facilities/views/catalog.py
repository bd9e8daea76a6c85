from django.conf import settings
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from ..services.catalog import available_regions, popular_treatments
from .facilities import with_cache_hint


@api_view(['GET'])
@permission_classes([AllowAny])
def popular_treatment_list(request):
    """Treatment names suggested by the quiz."""
    return with_cache_hint(Response(popular_treatments()), settings.DETAIL_CACHE_SECONDS)


@api_view(['GET'])
@permission_classes([AllowAny])
def region_list(request):
    """Region options as ``{value, label}`` pairs."""
    return with_cache_hint(Response(available_regions()), settings.DETAIL_CACHE_SECONDS)
