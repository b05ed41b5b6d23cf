"""Alert headers attached to entity responses."""

from urllib.parse import quote


def create_alert(application_name: str, message: str, param: str) -> dict[str, str]:
    """
    Build alert headers.

    Args:
        application_name: Application name used as header prefix
        message: Alert message
        param: Alert parameter (URL-encoded into the params header)

    Returns:
        Header mapping
    """
    return {
        f"X-{application_name}-alert": message,
        f"X-{application_name}-params": quote(param, safe=""),
    }


def create_entity_creation_alert(application_name: str, entity_name: str, param: str) -> dict[str, str]:
    """Alert headers for a created entity."""
    message = f"A new {entity_name} is created with identifier {param}"
    return create_alert(application_name, message, param)


def create_entity_update_alert(application_name: str, entity_name: str, param: str) -> dict[str, str]:
    """Alert headers for an updated entity."""
    message = f"A {entity_name} is updated with identifier {param}"
    return create_alert(application_name, message, param)


def create_entity_deletion_alert(application_name: str, entity_name: str, param: str) -> dict[str, str]:
    """Alert headers for a deleted entity."""
    message = f"A {entity_name} is deleted with identifier {param}"
    return create_alert(application_name, message, param)


def create_failure_alert(application_name: str, entity_name: str, default_message: str) -> dict[str, str]:
    """
    Build failure alert headers.

    Args:
        application_name: Application name used as header prefix
        entity_name: Entity the failed request addressed
        default_message: Error message

    Returns:
        Header mapping
    """
    return {
        f"X-{application_name}-error": default_message,
        f"X-{application_name}-params": entity_name,
    }
