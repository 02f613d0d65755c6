from movi.contracts.errors import CatalogError, DecodeError, NotFoundError, RemoteError

__all__ = ["CatalogError", "RemoteError", "NotFoundError", "DecodeError"]
