import logging

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken
from rest_framework_simplejwt.views import TokenRefreshView

from core.exceptions import ValidationError
from core.responses import success_response
from .serializers import LoginSerializer, UserSerializer, tokens_for_user
from .sessions import get_session

logger = logging.getLogger(__name__)


@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    serializer = LoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    user = serializer.validated_data['user']

    logger.info(f"User {user.email} logged in (role={user.role})")
    return success_response(
        {**tokens_for_user(user), 'user': UserSerializer(user).data},
        message='Login realizado com sucesso',
    )


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def logout(request):
    refresh = request.data.get('refresh')
    if not refresh:
        raise ValidationError('Refresh token é obrigatório', error_code='MISSING_REFRESH_TOKEN')
    try:
        RefreshToken(refresh).blacklist()
    except TokenError as e:
        raise ValidationError('Refresh token inválido', error_code='INVALID_REFRESH_TOKEN', details=str(e))
    return success_response(message='Logout realizado com sucesso')


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def me(request):
    return success_response(get_session(request).as_dict())


class RefreshTokenView(TokenRefreshView):
    """simplejwt refresh, answered in the dashboard envelope."""

    def post(self, request, *args, **kwargs):
        response = super().post(request, *args, **kwargs)
        return success_response(response.data)
