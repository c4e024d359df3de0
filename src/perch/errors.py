"""Perch exception hierarchy.

Resolution failures are never exceptions: the resolver reports them as
``NotFound`` results.  These types cover startup problems only.
"""


class PerchError(Exception):
    """Base for all perch-specific errors."""


class ConfigurationError(PerchError):
    """Raised when site configuration is invalid.

    Typically raised while building a ``Resolver`` or ``StaticSite``
    at startup, before any request is served.
    """
