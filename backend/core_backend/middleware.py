"""
Request/response middleware shared by every API endpoint.
"""
import json
import logging

from django.conf import settings
from django.http import HttpResponse

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}

JSON_CONTENT_TYPE = "application/json"


class JSONContentTypeMiddleware:
    """
    Guarantee that API responses declare a JSON content type and carry the
    standard security headers.

    Responses produced outside DRF (Django's own error pages, plain
    HttpResponse objects, uncaught exceptions) are rewritten so the mobile
    client never has to parse HTML.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        response = self.get_response(request)

        for header, value in SECURITY_HEADERS.items():
            response.setdefault(header, value)

        if not request.path.startswith("/api/"):
            return response

        content_type = response.get("Content-Type", "")
        if content_type.startswith(JSON_CONTENT_TYPE):
            return response

        if getattr(response, "streaming", False):
            response["Content-Type"] = JSON_CONTENT_TYPE
            return response

        if response.status_code >= 400:
            # Framework error pages are HTML; replace them with a JSON body
            return self._json_error(response.status_code, request)

        response["Content-Type"] = JSON_CONTENT_TYPE
        return response

    def process_exception(self, request, exception):
        """Last line of defence for exceptions that escape the view layer."""
        if not request.path.startswith("/api/"):
            return None
        logger.exception(f"Unhandled error while processing {request.method} {request.path}")
        body = {"error": "Internal server error"}
        if settings.DEBUG:
            body["details"] = str(exception)
        return self._finalize(HttpResponse(json.dumps(body), status=500))

    def _json_error(self, status_code, request):
        if status_code == 404:
            body = {
                "error": "Not Found",
                "message": f"The requested URL {request.path} was not found on this server.",
            }
        elif status_code >= 500:
            body = {"error": "Internal server error"}
        else:
            body = {"error": HttpResponse(status=status_code).reason_phrase}
        return self._finalize(HttpResponse(json.dumps(body), status=status_code))

    @staticmethod
    def _finalize(response):
        response["Content-Type"] = JSON_CONTENT_TYPE
        for header, value in SECURITY_HEADERS.items():
            response[header] = value
        return response


class RequestLoggingMiddleware:
    """Log every inbound request without echoing credentials."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        has_auth = "present" if request.META.get("HTTP_AUTHORIZATION") else "absent"
        logger.debug(f"{request.method} {request.path} (authorization header {has_auth})")
        response = self.get_response(request)
        logger.info(f"{request.method} {request.path} -> {response.status_code}")
        return response
