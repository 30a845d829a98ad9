from enum import Enum
from typing import Optional

from .models import User
from .sessions import Session


class Access(Enum):
    UNAUTHENTICATED = 'unauthenticated'
    FORBIDDEN = 'forbidden'
    ALLOWED = 'allowed'


def check_client_access(session: Optional[Session], client_slug: str) -> Access:
    """Decide whether ``session`` may touch the tenant identified by ``client_slug``.

    Stateless: callers evaluate it on every request.
    """
    if session is None:
        return Access.UNAUTHENTICATED
    if session.role != User.ROLE_ADMIN and session.client_slug != client_slug:
        return Access.FORBIDDEN
    return Access.ALLOWED


def check_admin_access(session: Optional[Session]) -> Access:
    if session is None:
        return Access.UNAUTHENTICATED
    if session.role != User.ROLE_ADMIN:
        return Access.FORBIDDEN
    return Access.ALLOWED
