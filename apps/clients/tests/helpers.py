from apps.authentication.models import User
from apps.clients.models import Client


def make_client(slug, **fields):
    fields.setdefault('name', slug.replace('-', ' ').title())
    return Client.objects.create(slug=slug, **fields)


def make_user(email, role=User.ROLE_CLIENT, client_slug='', password='testpass123'):
    return User.objects.create_user(
        username=email.split('@')[0],
        email=email,
        password=password,
        role=role,
        client_slug=client_slug,
    )


def make_admin(email='admin@dashboard.test'):
    return make_user(email, role=User.ROLE_ADMIN)
