"""
Account views.
"""
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import serialize_account
from .services import AccountService


class AccountSyncView(APIView):
    """
    POST /api/users/sync

    Create the caller's account from their identity provider profile on first
    sign-in. Safe to call on every app launch.
    """

    def post(self, request):
        account, created = AccountService.sync_account(request.user)

        if created:
            return Response(
                {"user": serialize_account(account), "message": "User created successfully"},
                status=status.HTTP_201_CREATED,
            )
        return Response(
            {"user": serialize_account(account), "message": "User already exists"},
            status=status.HTTP_200_OK,
        )


class CurrentAccountView(APIView):
    """
    GET /api/users/me
    """

    def get(self, request):
        account = AccountService.get_by_identity(request.user.identity_id)
        return Response({"user": serialize_account(account)})


class AccountProfileView(APIView):
    """
    PUT /api/users/profile

    Body may contain ``email`` and/or ``profilePicture``.
    """

    def put(self, request):
        account = AccountService.update_profile(request.user.identity_id, request.data)
        return Response({"user": serialize_account(account)})
