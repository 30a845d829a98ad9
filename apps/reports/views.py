from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from apps.authentication.permissions import HasClientAccess
from apps.clients.repository import ClientRepository
from core.payloads import json_body
from core.responses import success_response
from . import services
from .serializers import GenerateReportSerializer, ReportSerializer


class ClientReportsView(APIView):
    permission_classes = [IsAuthenticated, HasClientAccess]
    error_codes = {'get': 'LIST_REPORTS_ERROR', 'post': 'GENERATE_REPORT_ERROR'}

    def get(self, request, client):
        client_obj = ClientRepository.get_by_slug(client)
        reports = ReportSerializer(services.list_reports(client_obj), many=True).data
        return success_response(reports, totalCount=len(reports))

    def post(self, request, client):
        client_obj = ClientRepository.get_by_slug(client)
        serializer = GenerateReportSerializer(data=json_body(request))
        serializer.is_valid(raise_exception=True)

        period = serializer.validated_data.get('period') or {}
        report = services.generate_report(
            client_obj,
            serializer.validated_data['type'],
            days=period.get('days'),
        )
        return success_response(ReportSerializer(report).data, message='Relatório gerado com sucesso')
