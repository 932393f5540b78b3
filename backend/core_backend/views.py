"""
Project-level views: liveness probe and JSON error handlers.
"""
import logging

from django.conf import settings
from django.http import JsonResponse
from django.utils import timezone

logger = logging.getLogger(__name__)


def health_check(request):
    """Simple health check endpoint that doesn't require authentication"""
    return JsonResponse(
        {
            "status": "OK",
            "timestamp": timezone.now().isoformat(),
            "environment": settings.ENVIRONMENT,
        }
    )


def not_found(request, exception=None):
    return JsonResponse(
        {
            "error": "Not Found",
            "message": f"The requested URL {request.path} was not found on this server.",
        },
        status=404,
    )


def server_error(request):
    logger.error(f"Server error while processing {request.method} {request.path}")
    return JsonResponse({"error": "Internal server error"}, status=500)
