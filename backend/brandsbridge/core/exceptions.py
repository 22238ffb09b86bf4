"""
Service-layer error taxonomy.

Services raise these; a single application handler maps them to HTTP
responses, so routers never translate errors themselves.
"""


class ServiceError(Exception):
    """Base exception for all service-layer errors."""

    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(ServiceError):
    """Lookup by id, slug or key found no row."""

    def __init__(self, message: str):
        super().__init__(message, 404)


class ConflictError(ServiceError):
    """A write would violate a natural-key uniqueness constraint."""

    def __init__(self, message: str):
        super().__init__(message, 409)
