from django.apps import AppConfig
from django.conf import settings


class TicketsConfig(AppConfig):
    name = "tickets"
    verbose_name = "Cinema tickets"

    def ready(self) -> None:
        from tickets.logging_config import configure_logging

        configure_logging(
            log_level=getattr(settings, "LOG_LEVEL", "INFO"),
            json_logs=getattr(settings, "LOG_JSON", False),
        )
