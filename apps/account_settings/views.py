from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from apps.authentication.permissions import HasClientAccess
from apps.clients.repository import ClientRepository
from core.payloads import json_body
from core.responses import success_response
from . import services
from .serializers import ClientSettingsSerializer


class ClientSettingsView(APIView):
    permission_classes = [IsAuthenticated, HasClientAccess]
    error_codes = {'get': 'GET_SETTINGS_ERROR', 'put': 'UPDATE_SETTINGS_ERROR'}

    def get(self, request, client):
        client_obj = ClientRepository.get_by_slug(client)
        return success_response(services.build_settings(client_obj))

    def put(self, request, client):
        client_obj = ClientRepository.get_by_slug(client)
        serializer = ClientSettingsSerializer(data=json_body(request))
        serializer.is_valid(raise_exception=True)

        settings_view = services.save_settings(client_obj, serializer.validated_data)
        return success_response(settings_view, message='Configurações salvas com sucesso')
