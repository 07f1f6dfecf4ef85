"""
Accounts app views

Login, token verification and the current-user endpoint.
"""
import logging

from django.conf import settings
from rest_framework import status, viewsets
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAdminUser, IsAuthenticated
from rest_framework.response import Response

from .authentication import issue_token
from .models import User
from .serializers import LoginSerializer, UserSerializer

logger = logging.getLogger(__name__)


@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """
    Exchange username/password for a signed bearer token.

    POST /api/auth/login/
    """
    serializer = LoginSerializer(data=request.data, context={'request': request})
    if not serializer.is_valid():
        logger.info("Failed login attempt for %s", request.data.get('username', ''))
        return Response(
            {'error': 'Invalid credentials'},
            status=status.HTTP_401_UNAUTHORIZED,
        )

    user = serializer.validated_data['user']
    return Response(
        {
            'token': issue_token(user),
            'user': {'username': user.get_username()},
            'expires_in': settings.AUTH_TOKEN_MAX_AGE,
        }
    )


@api_view(['GET'])
def verify(request):
    """
    Confirm that the presented token is still valid.

    GET /api/auth/verify/
    """
    return Response({'valid': True, 'user': {'username': request.user.get_username()}})


@api_view(['POST'])
@permission_classes([AllowAny])
def logout(request):
    """Tokens are stateless; the client discards its copy."""
    return Response({'success': True})


class UserViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Read-only user listing for staff plus a `me` endpoint for everyone.
    """

    queryset = User.objects.all().order_by('id')
    serializer_class = UserSerializer

    def get_permissions(self):
        if self.action == 'me':
            permission_classes = [IsAuthenticated]
        else:
            permission_classes = [IsAdminUser]
        return [permission() for permission in permission_classes]

    @action(detail=False, methods=['get'])
    def me(self, request):
        """
        Return the current authenticated user's data.

        GET /api/users/me/
        """
        serializer = self.get_serializer(request.user)
        return Response(serializer.data)
