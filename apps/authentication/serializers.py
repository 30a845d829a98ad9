from rest_framework import serializers
from rest_framework_simplejwt.tokens import RefreshToken

from .models import User


class UserSerializer(serializers.ModelSerializer):
    clientSlug = serializers.CharField(source='client_slug', read_only=True)

    class Meta:
        model = User
        fields = ('id', 'email', 'username', 'role', 'clientSlug')


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)

    def validate(self, data):
        try:
            user = User.objects.get(email__iexact=data['email'])
        except User.DoesNotExist:
            raise serializers.ValidationError('Credenciais inválidas')

        if not user.check_password(data['password']):
            raise serializers.ValidationError('Credenciais inválidas')
        if not user.is_active:
            raise serializers.ValidationError('Conta de usuário desativada')

        data['user'] = user
        return data


def tokens_for_user(user):
    """Issue a refresh/access pair carrying the session claims."""
    refresh = RefreshToken.for_user(user)
    refresh['role'] = user.role
    refresh['client_slug'] = user.client_slug or None
    return {
        'refresh': str(refresh),
        'access': str(refresh.access_token),
    }
