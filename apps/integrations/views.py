from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.views import APIView

from core.exceptions import ValidationError
from core.payloads import json_body
from core.responses import error_response, success_response
from .google_ads import GoogleAdsClient, normalize_customer_id


def get_google_ads_client():
    return GoogleAdsClient.from_settings()


class GoogleAdsConnectionTestView(APIView):
    """POST checks that the server credentials reach the given Google Ads account."""
    error_codes = {'post': 'GOOGLE_ADS_CONNECTION_ERROR'}

    def get_permissions(self):
        if self.request.method == 'GET':
            return [AllowAny()]
        return [IsAuthenticated()]

    def get(self, request):
        return error_response(
            'METHOD_NOT_ALLOWED',
            'Use POST para testar conexão Google Ads',
            status.HTTP_405_METHOD_NOT_ALLOWED,
            requiredFields=['customerId'],
        )

    def post(self, request):
        data = json_body(request)
        credentials = data.get('credentials') if isinstance(data.get('credentials'), dict) else {}
        raw_customer_id = data.get('customerId') or credentials.get('customerId')

        if not raw_customer_id:
            raise ValidationError(
                'Customer ID é obrigatório',
                error_code='MISSING_CUSTOMER_ID',
                details='Informe o Customer ID do Google Ads',
            )

        customer_id = normalize_customer_id(raw_customer_id)
        if customer_id is None:
            raise ValidationError(
                'Customer ID inválido',
                error_code='INVALID_CUSTOMER_ID',
                details='O Customer ID deve conter apenas dígitos (ex.: 123-456-7890)',
            )

        result = get_google_ads_client().test_connection(customer_id)
        return success_response(result, message='Conexão com Google Ads estabelecida com sucesso')
