# apps/account_settings/services.py
import logging

from apps.clients.repository import ClientRepository

logger = logging.getLogger(__name__)

DEFAULT_NOTIFICATIONS = {
    'emailReports': True,
    'emailAlerts': True,
    'weeklyDigest': True,
    'campaignUpdates': True,
    'budgetAlerts': True,
    'performanceAlerts': False,
}

DEFAULT_PRIVACY = {
    'dataRetention': '12months',
    'allowAnalytics': True,
    'shareData': False,
    'marketingEmails': True,
}

INTEGRATIONS = ('googleAds', 'facebookAds', 'googleAnalytics')

# profile key -> Client column
PROFILE_FIELDS = {
    'name': 'name',
    'email': 'email',
    'phone': 'phone',
    'website': 'website',
    'address': 'address',
    'description': 'description',
}


def build_settings(client):
    stored = client.settings or {}
    integrations = client.integrations or {}

    return {
        'profile': {
            'name': client.name or '',
            'email': client.email or '',
            'phone': client.phone or '',
            'company': client.name or '',
            'website': client.website or '',
            'address': client.address or '',
            'description': client.description or '',
        },
        'notifications': {**DEFAULT_NOTIFICATIONS, **(stored.get('notifications') or {})},
        'privacy': {**DEFAULT_PRIVACY, **(stored.get('privacy') or {})},
        'integrations': {
            name: {
                'connected': bool((integrations.get(name) or {}).get('connected', False)),
                'lastSync': (integrations.get(name) or {}).get('lastSync'),
            }
            for name in INTEGRATIONS
        },
    }


def save_settings(client, payload):
    """Persist profile columns plus notification and privacy preferences.

    Integration state is owned by the integration flows and is not written here.
    """
    fields = {
        column: payload['profile'][key]
        for key, column in PROFILE_FIELDS.items()
        if key in payload.get('profile', {})
    }

    stored = dict(client.settings or {})
    for section in ('notifications', 'privacy'):
        if section in payload:
            stored[section] = {**(stored.get(section) or {}), **payload[section]}
    fields['settings'] = stored

    ClientRepository.update(client, **fields)
    logger.info(f"Settings saved for client {client.slug}: {sorted(fields)}")
    return build_settings(client)
