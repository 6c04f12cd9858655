"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class SteamResponseError(AdapterError):
    """Steam answered, but not in the shape we expect."""

    pass
