class StoreAdminError(Exception):
    """Base for errors the API answers with a specific status code."""

    status_code = 500

    def __init__(self, message: str = "Internal error"):
        super().__init__(message)
        self.message = message


class ValidationError(StoreAdminError):
    status_code = 400


class Unauthenticated(StoreAdminError):
    status_code = 401

    def __init__(self, message: str = "Unauthenticated"):
        super().__init__(message)


class Unauthorized(StoreAdminError):
    status_code = 403

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class NotFound(StoreAdminError):
    status_code = 404
