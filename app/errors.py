class InventoryError(Exception):
    """Base for failures a caller can act on. Mapped to an HTTP status in app.main."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(InventoryError):
    status_code = 404
    default_message = "Not found"


class ValidationError(InventoryError):
    status_code = 400
    default_message = "Validation error"


class UnauthenticatedError(InventoryError):
    status_code = 401
    default_message = "Access token required"


class ForbiddenError(InventoryError):
    status_code = 403
    default_message = "Insufficient permissions"


class ConflictError(InventoryError):
    status_code = 409
    default_message = "Resource already exists"
