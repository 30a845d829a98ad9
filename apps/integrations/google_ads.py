# apps/integrations/google_ads.py
"""
Minimal Google Ads REST client used to verify that the server-side credentials
can reach a customer account.

The check is a two-step handshake: exchange the refresh token for an access
token, then run one bounded GAQL query against ``googleAds:searchStream``.
"""
import logging
from dataclasses import dataclass

import requests
from django.conf import settings

from core.exceptions import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)

TOKEN_URL = 'https://oauth2.googleapis.com/token'
API_BASE_URL = 'https://googleads.googleapis.com'

CONNECTION_TEST_QUERY = """
    SELECT
      campaign.id,
      campaign.name,
      campaign.status
    FROM campaign
    LIMIT 1
"""


class TokenExchangeError(UpstreamError):
    default_detail = 'Falha ao obter token de acesso do Google'
    error_code = 'GOOGLE_ADS_TOKEN_ERROR'


class QueryError(UpstreamError):
    default_detail = 'Erro ao consultar a API do Google Ads'
    error_code = 'GOOGLE_ADS_QUERY_ERROR'


@dataclass(frozen=True)
class GoogleAdsCredentials:
    developer_token: str
    client_id: str
    client_secret: str
    refresh_token: str

    @classmethod
    def from_settings(cls, config=None):
        config = config if config is not None else settings.GOOGLE_ADS
        return cls(
            developer_token=config.get('DEVELOPER_TOKEN', ''),
            client_id=config.get('CLIENT_ID', ''),
            client_secret=config.get('CLIENT_SECRET', ''),
            refresh_token=config.get('REFRESH_TOKEN', ''),
        )

    @property
    def is_complete(self):
        return all([self.developer_token, self.client_id, self.client_secret, self.refresh_token])


def normalize_customer_id(customer_id):
    """``123-456-7890`` -> ``1234567890``; returns None when it is not numeric."""
    cleaned = str(customer_id).replace('-', '').strip()
    return cleaned if cleaned.isdigit() else None


class GoogleAdsClient:
    def __init__(self, credentials, api_version='v16', timeout=30.0, session=None):
        self.credentials = credentials
        self.api_version = api_version
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls):
        config = settings.GOOGLE_ADS
        return cls(
            GoogleAdsCredentials.from_settings(config),
            api_version=config.get('API_VERSION', 'v16'),
            timeout=config.get('TIMEOUT', 30.0),
        )

    def fetch_access_token(self):
        try:
            response = self.session.post(
                TOKEN_URL,
                data={
                    'client_id': self.credentials.client_id,
                    'client_secret': self.credentials.client_secret,
                    'refresh_token': self.credentials.refresh_token,
                    'grant_type': 'refresh_token',
                },
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise TokenExchangeError(details=f'Failed to refresh access token: {e}')

        if not response.ok:
            raise TokenExchangeError(details=f'Failed to refresh access token: {response.status_code} - {response.text}')

        try:
            payload = response.json()
        except ValueError:
            raise TokenExchangeError(details=f'Token response is not JSON: {response.text[:200]}')
        if not isinstance(payload, dict):
            raise TokenExchangeError(details=f'Unexpected token response: {payload!r}')

        access_token = payload.get('access_token')
        if not access_token:
            raise TokenExchangeError(details='Token response did not include access_token')
        return access_token

    def search_stream(self, customer_id, access_token, query):
        url = f'{API_BASE_URL}/{self.api_version}/customers/{customer_id}/googleAds:searchStream'
        try:
            response = self.session.post(
                url,
                headers={
                    'Authorization': f'Bearer {access_token}',
                    'developer-token': self.credentials.developer_token,
                    'Content-Type': 'application/json',
                },
                json={'query': query},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise QueryError(details=f'Google Ads API error: {e}')

        if not response.ok:
            try:
                error_data = response.json()
            except ValueError:
                error_data = response.text
            raise QueryError(details=f'Google Ads API error: {response.status_code} - {error_data}')

        # searchStream answers with a JSON array of batches, each carrying ``results``
        try:
            payload = response.json()
        except ValueError:
            raise QueryError(details=f'Google Ads API returned non-JSON body: {response.text[:200]}')

        batches = payload if isinstance(payload, list) else [payload]
        if not all(isinstance(batch, dict) for batch in batches):
            raise QueryError(details=f'Unexpected searchStream response: {payload!r}')
        return [row for batch in batches for row in (batch.get('results') or [])]

    def test_connection(self, customer_id):
        if not self.credentials.is_complete:
            raise ConfigurationError(
                'Credenciais do Google Ads não configuradas',
                error_code='GOOGLE_ADS_NOT_CONFIGURED',
                details='Configure GOOGLE_ADS_* no ambiente do servidor',
            )

        logger.info(f"Testing Google Ads connection for customer {customer_id}")
        access_token = self.fetch_access_token()
        campaigns = self.search_stream(customer_id, access_token, CONNECTION_TEST_QUERY)

        return {
            'customerId': customer_id,
            'campaignCount': len(campaigns),
        }
