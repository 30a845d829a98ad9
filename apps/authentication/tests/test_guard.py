from django.test import SimpleTestCase

from apps.authentication.guard import Access, check_admin_access, check_client_access
from apps.authentication.models import User
from apps.authentication.sessions import Session


def session(role='client', client_slug='acme'):
    return Session(user_id=1, email='user@acme.test', role=role, client_slug=client_slug)


class ClientAccessTest(SimpleTestCase):
    def test_no_session_is_unauthenticated(self):
        self.assertIs(check_client_access(None, 'acme'), Access.UNAUTHENTICATED)

    def test_client_user_reaches_own_client(self):
        self.assertIs(check_client_access(session(), 'acme'), Access.ALLOWED)

    def test_client_user_is_refused_other_clients(self):
        self.assertIs(check_client_access(session(), 'globex'), Access.FORBIDDEN)

    def test_client_user_without_slug_is_refused(self):
        self.assertIs(check_client_access(session(client_slug=None), 'acme'), Access.FORBIDDEN)

    def test_admin_reaches_any_client(self):
        admin = session(role='admin', client_slug=None)
        self.assertIs(check_client_access(admin, 'acme'), Access.ALLOWED)
        self.assertIs(check_client_access(admin, 'does-not-exist'), Access.ALLOWED)


class AdminAccessTest(SimpleTestCase):
    def test_decisions(self):
        self.assertIs(check_admin_access(None), Access.UNAUTHENTICATED)
        self.assertIs(check_admin_access(session()), Access.FORBIDDEN)
        self.assertIs(check_admin_access(session(role='admin')), Access.ALLOWED)

    def test_admin_role_matches_user_model(self):
        self.assertIs(check_admin_access(session(role=User.ROLE_ADMIN)), Access.ALLOWED)
        self.assertIs(check_admin_access(session(role=User.ROLE_CLIENT)), Access.FORBIDDEN)
