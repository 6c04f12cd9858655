"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Missing or malformed input."""

    pass


class DuplicateIdentityError(DomainError):
    """Raised when a unique email or Steam ID is already taken."""

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"A user with this {field} already exists")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidCredentialsError(DomainError):
    """Raised when credentials do not verify.

    The message never says which part of the credentials was wrong.
    """

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class UnauthenticatedError(DomainError):
    """Raised when no usable session marker accompanies a request."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class ProviderUnavailableError(DomainError):
    """Raised when Steam cannot be reached or answers with an error.

    Callers may retry; nothing in this service retries on their behalf.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Steam is unavailable ({operation}), please try again later")


class NoDataError(DomainError):
    """Raised when Steam reports no recently played games."""

    def __init__(self, steam_id: str):
        self.steam_id = steam_id
        super().__init__("No recently played games found")


class NoAllowedDataError(DomainError):
    """Raised when none of the recently played games are tracked titles."""

    def __init__(self, steam_id: str):
        self.steam_id = steam_id
        super().__init__("No allowed games found in recently played games")
