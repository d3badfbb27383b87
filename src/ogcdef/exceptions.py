"""Exceptions raised by ogcdef.

Unrecognized identifiers are never reported through exceptions: parsing
and extraction functions return ``None`` for them. Exceptions are reserved
for contract violations by the caller.
"""

__all__ = ["ArgumentError", "ensure_text"]


class ArgumentError(ValueError):
    """Raised when a required argument is missing or has the wrong type."""

    def __init__(
        self,
        argument: str,
        message: str | None = None,
    ) -> None:
        """Initialize argument error.

        Parameters
        ----------
        argument : str
            Name of the offending argument.
        message : str | None, optional
            Error message. Defaults to a "must not be None" message.
        """
        if message is None:
            message = f"Argument '{argument}' must not be None"
        super().__init__(message)
        self.argument = argument


def ensure_text(argument: str, value: object) -> str:
    """Return ``value`` if it is a string, otherwise raise :class:`ArgumentError`.

    Parameters
    ----------
    argument : str
        Argument name, used in the error message.
    value : object
        Value to check.

    Returns
    -------
    str
        The same value.
    """
    if value is None:
        raise ArgumentError(argument)
    if not isinstance(value, str):
        raise ArgumentError(
            argument,
            f"Argument '{argument}' must be a str, got {type(value).__name__}",
        )
    return value
