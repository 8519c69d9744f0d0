"""Exception types raised by ogpgen."""


class OGPError(Exception):
    """Base class for all ogpgen errors."""


class ValidationError(OGPError, ValueError):
    """
    Raised when a value is out of the range the renderer can safely handle.

    Attributes:
        field: Name of the offending value (e.g., "width").
        value: The rejected value.
    """

    def __init__(self, field: str, value: object, message: str) -> None:
        super().__init__(f"{field}={value!r}: {message}")
        self.field = field
        self.value = value
