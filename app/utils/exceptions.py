"""
Custom exceptions for CineCatalog application.
"""


class CineCatalogException(Exception):
    """Base exception for CineCatalog."""
    pass


class FilmNotFoundError(CineCatalogException):
    """Raised when a film is not found."""
    def __init__(self, film_id: str):
        self.film_id = film_id
        super().__init__(f"Film not found: {film_id}")


class CategoryNotFoundError(CineCatalogException):
    """Raised when a category is not found."""
    def __init__(self, category_id: str):
        self.category_id = category_id
        super().__init__(f"Category not found: {category_id}")


class DuplicateAssociationError(CineCatalogException):
    """Raised when a film/category association already exists on one side."""
    def __init__(self, owner: str, owner_id: str, member_id: str):
        self.owner = owner
        self.owner_id = owner_id
        self.member_id = member_id
        super().__init__(f"{member_id} is already associated with {owner} {owner_id}")


class ConcurrentUpdateError(CineCatalogException):
    """Raised when a save is attempted against a stale version."""
    def __init__(self, entity: str, entity_id: str, version: int):
        self.entity = entity
        self.entity_id = entity_id
        self.version = version
        super().__init__(
            f"{entity} {entity_id} was modified concurrently (expected version {version})"
        )


class StoreError(CineCatalogException):
    """Raised when the underlying document store fails."""
    def __init__(self, message: str, cause: Exception = None):
        self.cause = cause
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class RetrievalError(StoreError):
    """Raised when a listing query fails."""
    pass


class AuthenticationError(CineCatalogException):
    """Raised when the bearer credential is missing or invalid."""
    pass


class AuthorizationError(CineCatalogException):
    """Raised when the authenticated identity lacks a permitted role."""
    pass
