from typing import Any


class ValidationError(Exception):
    pass


class InvalidArgumentError(ValueError):
    """Raised when a required endpoint or grid argument is missing."""

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"Argument '{argument}' cannot be None")


def require(value: Any, argument: str) -> None:
    if value is None:
        raise InvalidArgumentError(argument)
