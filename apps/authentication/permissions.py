from rest_framework.permissions import BasePermission

from core.exceptions import Forbidden, Unauthenticated
from .guard import Access, check_admin_access, check_client_access
from .sessions import get_session


def _enforce(access):
    if access is Access.UNAUTHENTICATED:
        raise Unauthenticated()
    if access is Access.FORBIDDEN:
        raise Forbidden()
    return True


class HasClientAccess(BasePermission):
    """Tenant guard for routes carrying a ``client`` slug in the URL."""

    def has_permission(self, request, view):
        client_slug = view.kwargs.get('client')
        return _enforce(check_client_access(get_session(request), client_slug))


class IsDashboardAdmin(BasePermission):
    def has_permission(self, request, view):
        return _enforce(check_admin_access(get_session(request)))
