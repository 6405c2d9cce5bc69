"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class InvalidRequestError(Exception):
    """Raised when caller input is well-formed but not acceptable (bad request)."""


class RestrictedFieldError(InvalidRequestError):
    """Raised when an update touches a field that may not be changed."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field} is restricted for update")


class InvalidQueryError(InvalidRequestError):
    """Raised when a listing parameter parses as a number but is out of range."""

    def __init__(self, parameter: str, value: int):
        self.parameter = parameter
        self.value = value
        super().__init__(f"{parameter} must be a positive integer, got {value}")


class AuthenticationError(Exception):
    """Raised when credentials or a bearer token cannot be verified."""
