"""
Catalog error taxonomy.

Everything raised by the catalog client derives from CatalogError.
NotFoundError and DecodeError are both RemoteError so callers that only
care about "the remote call failed" can catch a single type.
"""


class CatalogError(Exception):
    """Base class for catalog client failures."""


class RemoteError(CatalogError):
    """Non-2xx response or transport failure talking to the catalog provider."""

    def __init__(self, message: str, status: int | None = None, url: str | None = None):
        super().__init__(message)
        self.status = status
        self.url = url


class NotFoundError(RemoteError):
    """The provider answered 404 for the requested resource."""


class DecodeError(RemoteError):
    """The response body was not JSON or did not have the expected shape."""
