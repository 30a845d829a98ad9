from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from apps.authentication.permissions import HasClientAccess
from apps.clients.repository import ClientRepository
from core.payloads import json_body
from core.responses import success_response
from . import services


class ClientChartsView(APIView):
    permission_classes = [IsAuthenticated, HasClientAccess]
    error_codes = {'get': 'LIST_CHARTS_ERROR', 'post': 'SAVE_CHART_ERROR'}

    def get(self, request, client):
        client_obj = ClientRepository.get_by_slug(client)
        return success_response(services.list_charts(client_obj))

    def post(self, request, client):
        client_obj = ClientRepository.get_by_slug(client)
        chart_config = json_body(request)
        chart = services.upsert_chart(client_obj, chart_config)
        return success_response(chart, message='Gráfico salvo com sucesso')


class ClientChartDetailView(APIView):
    permission_classes = [IsAuthenticated, HasClientAccess]
    error_codes = {'delete': 'DELETE_CHART_ERROR'}

    def delete(self, request, client, chart_id):
        client_obj = ClientRepository.get_by_slug(client)
        services.delete_chart(client_obj, chart_id)
        return success_response(message='Gráfico excluído com sucesso')
