"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class PasswordHashError(UtilError):
    """Stored password hash could not be parsed."""

    pass
