"""Errors raised while wiring the application together."""


class UtilError(Exception):
    """Root of the wiring errors; never reaches an HTTP client."""


class DependencyInjectionError(UtilError):
    """A mockable provider has no implementation for the requested mode."""
