"""Token API views: register, login and the current-user profile."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore
from rest_framework import status  # type: ignore
from rest_framework.permissions import AllowAny, IsAuthenticated  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from shared.api.exceptions import ResourceNotFound

from .auth_serializers import LoginSerializer, RegisterSerializer
from .serializers import ProfileSerializer, UserSerializer
from .tokens import issue_token

User = get_user_model()


class RegisterView(APIView):
    authentication_classes: list = []
    permission_classes = [AllowAny]

    def post(self, request):  # type: ignore
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        data = {
            "message": "User registered successfully",
            "user": UserSerializer(user).data,
            "token": issue_token(user),
        }
        return Response(data, status=status.HTTP_201_CREATED)


class LoginView(APIView):
    authentication_classes: list = []
    permission_classes = [AllowAny]

    def post(self, request):  # type: ignore
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data["user"]
        data = {
            "message": "Login successful",
            "user": UserSerializer(user).data,
            "token": issue_token(user),
        }
        return Response(data, status=status.HTTP_200_OK)


class MeView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):  # type: ignore
        user = User.objects.filter(pk=request.user.id).first()
        if user is None:
            raise ResourceNotFound(_("User tidak ditemukan"), error="User not found")
        return Response({"user": ProfileSerializer(user).data})
