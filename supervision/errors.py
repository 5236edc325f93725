"""
Service error taxonomy.

Every failure a workflow reports to its caller is a ServiceError subclass.
The HTTP status code travels with the error so the error handler in
create_app() can render it without knowing the workflow.
"""


class ServiceError(Exception):
    """Base class for request-scoped failures reported to the caller."""

    status_code = 500
    default_message = 'internal error'

    def __init__(self, message=None, details=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.details = details

    def to_dict(self):
        """Error payload for the failure envelope."""
        if self.details is not None:
            return self.details
        return self.message


class ValidationError(ServiceError):
    """Malformed input or an invalid enum value."""
    status_code = 400
    default_message = 'invalid request'


class AuthenticationError(ServiceError):
    """The caller credential cannot be resolved to a user id."""
    status_code = 401
    default_message = 'authentication required'


class AuthorizationError(ServiceError):
    """The caller's role lacks permission for the action."""
    status_code = 403
    default_message = 'access denied'


class NotFoundError(ServiceError):
    """A user, thesis, or schedule is absent."""
    status_code = 404
    default_message = 'not found'


class ConflictError(ServiceError):
    """The target exists but is no longer in a state that allows the action."""
    status_code = 409
    default_message = 'conflict'


class StorageError(ServiceError):
    """Backend read or write failure."""
    status_code = 500
    default_message = 'storage failure'
