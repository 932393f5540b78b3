from django.apps import AppConfig
from django.conf import settings
import logging

logger = logging.getLogger(__name__)


class CoreBackendConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "core_backend"

    def ready(self):
        """
        Apply process-wide configuration once Django has loaded.
        """
        self._configure_runserver_port()

        if not getattr(settings, "TWILIO_CONFIGURED", False):
            logger.warning(
                "Twilio credentials are not configured; SMS notifications will be skipped"
            )

    def _configure_runserver_port(self):
        """
        Make `manage.py runserver` listen on $PORT when no address is passed.
        """
        port = str(getattr(settings, "PORT", "") or "")
        if not port.isdigit():
            return

        from django.core.management.commands import runserver

        runserver.Command.default_port = port
        logger.debug(f"runserver default port set to {port}")
