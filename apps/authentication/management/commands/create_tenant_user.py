from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from apps.clients.models import Client

User = get_user_model()


class Command(BaseCommand):
    help = 'Create a dashboard user bound to a client (or an admin with --role admin)'

    def add_arguments(self, parser):
        parser.add_argument('--email', type=str, required=True)
        parser.add_argument('--password', type=str, required=True)
        parser.add_argument('--username', type=str, required=True)
        parser.add_argument('--role', type=str, default=User.ROLE_CLIENT,
                            choices=[User.ROLE_ADMIN, User.ROLE_CLIENT])
        parser.add_argument('--client-slug', type=str, default='')

    def handle(self, *args, **options):
        email = options['email']
        role = options['role']
        client_slug = options['client_slug']

        if User.objects.filter(email=email).exists():
            raise CommandError(f'User with email {email} already exists')

        if role == User.ROLE_CLIENT:
            if not client_slug:
                raise CommandError('--client-slug is required for client users')
            if not Client.objects.filter(slug=client_slug).exists():
                raise CommandError(f'Client "{client_slug}" does not exist')

        User.objects.create_user(
            username=options['username'],
            email=email,
            password=options['password'],
            role=role,
            client_slug=client_slug,
        )

        scope = 'all clients' if role == User.ROLE_ADMIN else f'client {client_slug}'
        self.stdout.write(
            self.style.SUCCESS(f'Successfully created {role} user {email} for {scope}')
        )
