"""
Per-request session view of the authenticated user.

The identity itself is resolved by simplejwt's ``JWTAuthentication``; this
module only exposes the role and tenant claim the authorization guard needs.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Session:
    user_id: int
    email: str
    role: str
    client_slug: Optional[str] = None

    def as_dict(self):
        return {
            'userId': self.user_id,
            'email': self.email,
            'role': self.role,
            'clientSlug': self.client_slug,
        }


def get_session(request) -> Optional[Session]:
    user = getattr(request, 'user', None)
    if user is None or not user.is_authenticated:
        return None
    return Session(
        user_id=user.pk,
        email=user.email,
        role=user.role,
        client_slug=user.client_slug or None,
    )
