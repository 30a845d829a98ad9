"""
Uniform JSON envelope returned by every endpoint.

    {"success": bool, "data": ..., "message": str, "error": str, "timestamp": iso8601}

Keys without a value are left out; handlers may attach extra top-level keys
(``totalCount`` on report listings, ``details`` on upstream failures).
"""

from django.utils import timezone
from rest_framework import status
from rest_framework.response import Response

_MISSING = object()


def envelope(success, data=_MISSING, message=None, error=None, **extra):
    payload = {'success': success}
    if data is not _MISSING:
        payload['data'] = data
    if message is not None:
        payload['message'] = str(message)
    if error is not None:
        payload['error'] = error
    payload.update(extra)
    payload['timestamp'] = timezone.now().isoformat()
    return payload


def success_response(data=_MISSING, message=None, status_code=status.HTTP_200_OK, **extra):
    return Response(envelope(True, data=data, message=message, **extra), status=status_code)


def error_response(error, message, status_code, **extra):
    return Response(envelope(False, message=message, error=error, **extra), status=status_code)
