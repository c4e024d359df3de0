"""Perch: a minimal static file server.

Maps request paths to files beneath a fixed root directory, with
traversal-safe resolution and ``.html`` fallback for extensionless URLs.

Basic usage::

    from perch import SiteConfig, StaticSite

    site = StaticSite(SiteConfig(root="public"))
    site.run()

Or from the command line::

    perch --root public --port 8000
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "NotFound",
    "PerchError",
    "Resolver",
    "ServeFile",
    "SiteConfig",
    "StaticSite",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import perch`` fast while providing a clean top-level API.
    """
    if name == "StaticSite":
        from perch.app import StaticSite

        return StaticSite

    if name == "SiteConfig":
        from perch.config import SiteConfig

        return SiteConfig

    if name in ("Resolver", "ServeFile", "NotFound"):
        from perch import resolver as _resolver

        return getattr(_resolver, name)

    if name in ("PerchError", "ConfigurationError"):
        from perch import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
