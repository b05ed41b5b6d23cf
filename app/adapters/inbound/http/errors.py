"""HTTP error types."""

from fastapi import HTTPException, status

from app.adapters.inbound.http.header_util import create_failure_alert
from app.infrastructure.config.settings import settings


class BadRequestAlertException(HTTPException):
    """400 error carrying an entity name, error key and failure alert headers."""

    def __init__(self, default_message: str, entity_name: str, error_key: str) -> None:
        """
        Initialize error.

        Args:
            default_message: Human readable message
            entity_name: Entity the request addressed
            error_key: Machine readable key (e.g. 'idexists')
        """
        self.entity_name = entity_name
        self.error_key = error_key
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "title": default_message,
                "status": status.HTTP_400_BAD_REQUEST,
                "entityName": entity_name,
                "errorKey": error_key,
                "message": f"error.{error_key}",
                "params": entity_name,
            },
            headers=create_failure_alert(settings.application_name, entity_name, default_message),
        )
