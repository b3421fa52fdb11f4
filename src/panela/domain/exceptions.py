"""Domain exceptions."""


class PanelaError(Exception):
    """Base exception for Panela."""

    pass


class PermissionDenied(PanelaError):
    """User does not have permission for the requested action."""

    pass


class NotFound(PanelaError):
    """Requested resource was not found."""

    pass


class ValidationError(PanelaError):
    """Validation failed for input data."""

    pass


class PolicyConfigurationError(PanelaError):
    """Access policy tables are inconsistent or reference unknown names."""

    pass
