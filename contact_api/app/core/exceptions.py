"""
Domain errors raised by the service layer.

Services raise these before touching the store; the API layer maps
them onto HTTP responses so that a rejected request never surfaces as
a server error.
"""


class ValidationError(ValueError):
    """A contact violates a business rule and was not persisted."""
