"""
Domain exceptions

Authentication failures all surface as 401; cliente failures carry what the
route layer needs to build the 400/404/500 bodies.
"""

from typing import List


class AuthenticationError(Exception):
    """Base class for bearer token rejections"""

    reason: str = "authentication_failed"

    def __init__(self, message: str = "Authentication failed"):
        self.message = message
        super().__init__(message)


class MissingTokenError(AuthenticationError):
    reason = "missing_token"


class InvalidTokenError(AuthenticationError):
    reason = "invalid_token"


class UserNotFoundError(AuthenticationError):
    reason = "user_not_found"


class UserInactiveError(AuthenticationError):
    reason = "user_inactive"


class ClienteError(Exception):
    """Base class for cliente operation failures"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(ClienteError):
    """Payload failed one or more field rules"""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("Dados inválidos")


class DuplicateError(ClienteError):
    """Business key already taken by another cliente"""

    def __init__(self, message: str, details: str):
        self.details = details
        super().__init__(message)


class NotFoundError(ClienteError):
    def __init__(self, message: str = "Cliente não encontrado"):
        super().__init__(message)


class StoreError(ClienteError):
    """The data store rejected or failed a query"""
