"""
Error taxonomy and the DRF exception handler that renders it.

Every view runs inside DRF's ``handle_exception`` boundary; this handler is the
single place where failures become envelopes. Unexpected exceptions are logged
with their traceback and reported to the caller as a generic ``InternalError``.
"""

import logging

from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.views import exception_handler

from .responses import envelope

logger = logging.getLogger(__name__)


class DashboardError(exceptions.APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Erro interno do servidor'
    default_code = 'error'
    error_code = 'INTERNAL_ERROR'

    def __init__(self, detail=None, error_code=None, details=None):
        super().__init__(detail=detail)
        if error_code:
            self.error_code = error_code
        self.details = details


class ValidationError(DashboardError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Dados inválidos'
    default_code = 'invalid'
    error_code = 'VALIDATION_ERROR'


class Unauthenticated(exceptions.NotAuthenticated):
    default_detail = 'Não autorizado'
    error_code = 'UNAUTHENTICATED'


class Forbidden(exceptions.PermissionDenied):
    default_detail = 'Acesso negado a este cliente'
    error_code = 'FORBIDDEN'


class NotFound(DashboardError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Recurso não encontrado'
    default_code = 'not_found'
    error_code = 'NOT_FOUND'


class UpstreamError(DashboardError):
    """Failure reported by an external platform (Google Ads, OAuth)."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Erro ao comunicar com serviço externo'
    default_code = 'upstream_error'
    error_code = 'UPSTREAM_ERROR'


class ConfigurationError(DashboardError):
    default_detail = 'Serviço não configurado no servidor'
    default_code = 'misconfigured'
    error_code = 'MISCONFIGURED'


class InternalError(DashboardError):
    pass


# Error codes for the exceptions DRF raises on its own
DRF_ERROR_CODES = {
    'not_authenticated': 'UNAUTHENTICATED',
    'authentication_failed': 'UNAUTHENTICATED',
    'token_not_valid': 'UNAUTHENTICATED',
    'permission_denied': 'FORBIDDEN',
    'not_found': 'NOT_FOUND',
    'invalid': 'VALIDATION_ERROR',
    'parse_error': 'VALIDATION_ERROR',
    'method_not_allowed': 'METHOD_NOT_ALLOWED',
    'unsupported_media_type': 'UNSUPPORTED_MEDIA_TYPE',
    'not_acceptable': 'NOT_ACCEPTABLE',
}


def _view_error_code(context):
    """Internal error code declared by the view for the current method, if any."""
    view = context.get('view')
    request = context.get('request')
    codes = getattr(view, 'error_codes', None) or {}
    if request is not None:
        return codes.get(request.method.lower())
    return None


def _error_code(exc):
    code = getattr(exc, 'error_code', None)
    if code:
        return code
    default_code = getattr(exc, 'default_code', 'error')
    return DRF_ERROR_CODES.get(default_code, str(default_code).upper())


def _message(exc):
    if isinstance(exc, exceptions.ValidationError):
        return 'Dados inválidos'
    if isinstance(exc.detail, (list, dict)):
        return str(exc.default_detail)
    return str(exc.detail)


def envelope_exception_handler(exc, context):
    if isinstance(exc, Http404):
        exc = NotFound()
    elif isinstance(exc, DjangoPermissionDenied):
        exc = Forbidden()

    if not isinstance(exc, exceptions.APIException):
        view = context.get('view')
        logger.error(
            f"Unhandled error in {view.__class__.__name__ if view else 'unknown view'}: {exc}",
            exc_info=exc,
        )
        exc = InternalError(error_code=_view_error_code(context))
    elif isinstance(exc, DashboardError) and exc.status_code >= 500:
        logger.error(f"{exc.__class__.__name__} [{_error_code(exc)}]: {exc.detail} {exc.details or ''}")

    response = exception_handler(exc, context)
    if response is None:
        return None

    extra = {}
    details = getattr(exc, 'details', None)
    if details is not None:
        extra['details'] = details
    elif isinstance(exc, exceptions.ValidationError):
        extra['details'] = exc.detail

    response.data = envelope(False, message=_message(exc), error=_error_code(exc), **extra)
    return response
