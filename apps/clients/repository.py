# apps/clients/repository.py
import logging

from django.db import transaction

from core.exceptions import NotFound
from .models import Client

logger = logging.getLogger(__name__)


class ClientRepository:
    """Persistence adapter for tenant records.

    Handlers never touch ``Client.objects`` directly; every read and write of
    a client goes through here.
    """

    @staticmethod
    def find_by_slug(slug):
        return Client.objects.filter(slug=slug).first()

    @staticmethod
    def get_by_slug(slug):
        client = ClientRepository.find_by_slug(slug)
        if client is None:
            raise NotFound('Cliente não encontrado', error_code='CLIENT_NOT_FOUND')
        return client

    @staticmethod
    def all():
        return list(Client.objects.order_by('id'))

    @staticmethod
    def with_tag(value):
        # JSON containment lookups are not portable (SQLite), so scan in Python
        return [client for client in ClientRepository.all() if value in (client.tags or [])]

    @staticmethod
    def update(client, **fields):
        for name, value in fields.items():
            setattr(client, name, value)
        client.save(update_fields=[*fields.keys(), 'updated_at'])
        return client

    @staticmethod
    def update_many(changes):
        """Apply ``[(client, {field: value}), ...]`` as one unit.

        All-or-nothing: the writes share a transaction, so a failure on any
        client leaves every client in the batch untouched.
        """
        with transaction.atomic():
            for client, fields in changes:
                ClientRepository.update(client, **fields)
        logger.debug(f"Batch update applied to {len(changes)} clients")
        return len(changes)
