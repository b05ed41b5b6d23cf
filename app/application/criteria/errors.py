"""Criteria parsing errors."""


class MalformedFilterError(ValueError):
    """Raised when a filter query parameter cannot be parsed."""

    def __init__(self, parameter: str, reason: str) -> None:
        """
        Initialize error.

        Args:
            parameter: Offending query parameter name (e.g. 'name.startsWith')
            reason: Human readable reason
        """
        self.parameter = parameter
        self.reason = reason
        super().__init__(f"Malformed filter {parameter!a}: {reason}")


class InvalidSortError(ValueError):
    """Raised when a sort parameter references an unsortable property."""

    def __init__(self, property_name: str) -> None:
        self.property_name = property_name
        super().__init__(f"No sortable property {property_name!a}")
