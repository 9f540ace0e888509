import logging

from rest_framework import generics
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework_simplejwt.views import TokenObtainPairView

from .serializers import (
    CustomTokenObtainPairSerializer,
    UserDetailsSerializer,
    UserRegistrationSerializer,
)

logger = logging.getLogger(__name__)


class RegisterAPIView(generics.CreateAPIView):
    """
    POST: Create an account and return a token pair so the client is logged in straight away.
    """
    serializer_class=UserRegistrationSerializer
    permission_classes=[AllowAny]
    authentication_classes=[]

    def perform_create(self, serializer):
        user = serializer.save()
        logger.info(f"Registered user {user.pk}")

register_api_view=RegisterAPIView.as_view()


class LoginAPIView(TokenObtainPairView):
    serializer_class=CustomTokenObtainPairSerializer

login_api_view=LoginAPIView.as_view()


class UserDetailAPIView(generics.RetrieveAPIView):
    """
    GET: The authenticated user.
    """
    serializer_class=UserDetailsSerializer
    permission_classes=[IsAuthenticated]

    def get_object(self):
        return self.request.user

user_detail_view=UserDetailAPIView.as_view()
