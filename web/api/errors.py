"""API errors and validation helpers."""

from settings import MAX_QUERY_LIMIT


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


class ExportError(Exception):
    """Export artifact could not be produced. Shown to the user."""

    def __init__(self, message: str = "Failed to export analytics data"):
        self.message = message
        super().__init__(self.message)


MIN_LIMIT = 1


def validate_limit(limit: int) -> None:
    """Validate a listing limit is in range."""
    if not MIN_LIMIT <= limit <= MAX_QUERY_LIMIT:
        raise ValidationError(f"Invalid limit: {limit}. Must be between {MIN_LIMIT} and {MAX_QUERY_LIMIT}")
