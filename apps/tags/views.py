from rest_framework.views import APIView

from apps.authentication.permissions import IsDashboardAdmin
from core.exceptions import ValidationError
from core.payloads import json_body
from core.responses import success_response
from . import services


class TagListView(APIView):
    permission_classes = [IsDashboardAdmin]
    error_codes = {'get': 'LIST_TAGS_ERROR'}

    def get(self, request):
        tags = services.list_tags()
        return success_response(tags, totalCount=len(tags))


class TagDetailView(APIView):
    """PUT renames a tag on every client, DELETE strips it from every client."""
    permission_classes = [IsDashboardAdmin]
    error_codes = {'put': 'UPDATE_TAG_ERROR', 'delete': 'DELETE_TAG_ERROR'}

    def put(self, request, tag_id):
        data = json_body(request)
        name = data.get('name')
        if not isinstance(name, str) or not name.strip():
            raise ValidationError('Nome da tag é obrigatório', error_code='MISSING_TAG_NAME')

        tag = services.rename_tag(tag_id, name, color=data.get('color'))
        return success_response(tag, message='Tag atualizada com sucesso')

    def delete(self, request, tag_id):
        result = services.delete_tag(tag_id)
        return success_response(result, message='Tag removida com sucesso')
