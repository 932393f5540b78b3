import logging

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.permissions import AllowAny

from .exceptions import NotificationError, SMSNotConfiguredError
from .serializers import SendSMSSerializer
from .services import SMSNotifier

logger = logging.getLogger(__name__)


class SendSMSView(APIView):
    """
    POST /api/sendSms

    Ad hoc text message dispatch. Body: ``{"phoneNumber": str, "mssg": str}``.
    Unlike order notifications, delivery failures are reported to the caller.
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request, *args, **kwargs):
        serializer = SendSMSSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {"success": False, "error": "Phone number and message are required"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        phone_number = serializer.validated_data.get("phoneNumber")
        message = serializer.validated_data.get("mssg")
        if not phone_number or not message:
            return Response(
                {"success": False, "error": "Phone number and message are required"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            sid = SMSNotifier().send(phone_number, message)
        except SMSNotConfiguredError as e:
            logger.error("SMS endpoint called but the SMS provider is not configured")
            return Response(
                {"success": False, "error": e.message},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        except NotificationError as e:
            return Response(
                {"success": False, "error": e.message or "Failed to send SMS"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response({"success": True, "sid": sid}, status=status.HTTP_200_OK)
