# apps/tags/services.py
"""
Tags are not stored on their own: a tag is a string value inside
``Client.tags`` and its id is ``"tag-" + value``. Renaming or deleting a tag
rewrites every client that holds the value.
"""
import logging

from apps.clients.repository import ClientRepository

logger = logging.getLogger(__name__)

TAG_PREFIX = 'tag-'
DEFAULT_COLOR = 'primary'


def tag_id_for(value):
    return f"{TAG_PREFIX}{value}"


def tag_value_from_id(tag_id):
    if tag_id.startswith(TAG_PREFIX):
        return tag_id[len(TAG_PREFIX):]
    return tag_id


def list_tags():
    """Distinct tag values across all clients, in first-seen order."""
    counts = {}
    for client in ClientRepository.all():
        for value in dict.fromkeys(client.tags or []):
            counts[value] = counts.get(value, 0) + 1

    return [
        {'id': tag_id_for(value), 'name': value, 'color': DEFAULT_COLOR, 'count': count}
        for value, count in counts.items()
    ]


def rename_tag(tag_id, new_name, color=None):
    old_value = tag_value_from_id(tag_id)
    new_value = new_name.strip()

    clients = ClientRepository.with_tag(old_value)
    changes = [
        (client, {'tags': [new_value if tag == old_value else tag for tag in client.tags]})
        for client in clients
    ]
    ClientRepository.update_many(changes)

    logger.info(f"Tag '{old_value}' renamed to '{new_value}' on {len(clients)} clients")
    return {
        'id': tag_id_for(new_value),
        'previousId': tag_id,
        'name': new_value,
        'color': color or DEFAULT_COLOR,
        'count': len(clients),
    }


def delete_tag(tag_id):
    value = tag_value_from_id(tag_id)

    clients = ClientRepository.with_tag(value)
    changes = [
        (client, {'tags': [tag for tag in client.tags if tag != value]})
        for client in clients
    ]
    ClientRepository.update_many(changes)

    logger.info(f"Tag '{value}' removed from {len(clients)} clients")
    return {'id': tag_id, 'count': len(clients)}
