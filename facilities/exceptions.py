import logging

from rest_framework import status
from rest_framework.exceptions import APIException, NotFound, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


class InvalidIdentifier(ValidationError):
    default_detail = 'Invalid facility ID'
    default_code = 'invalid_identifier'


class FacilityNotFound(NotFound):
    default_detail = 'Facility not found'
    default_code = 'not_found'


class RepositoryFailure(APIException):
    """The data store failed; the message never carries the cause."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Failed to fetch data'
    default_code = 'repository_failure'


def _message(data) -> str:
    if isinstance(data, dict):
        data = data.get('detail', data)
    if isinstance(data, list) and len(data) == 1:
        data = data[0]
    return str(data)


def api_exception_handler(exc, context):
    resp = drf_exception_handler(exc, context)
    if resp is None:
        logger.exception("Unexpected API error", exc_info=exc)
        return Response({'error': 'Internal server error'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
    if resp.status_code >= 500:
        logger.error("API error %s: %s", resp.status_code, _message(resp.data), exc_info=exc.__cause__)
    resp.data = {'error': _message(resp.data)}
    return resp
