"""Option values whose updates respect the precedence of their source."""

from __future__ import annotations

from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class OptionValueType(Enum):
    """Where an option's current value came from, lowest precedence first."""

    DEFAULT = "DEFAULT"
    FROM_FILE = "FROM_FILE"
    FROM_COMMAND_LINE = "FROM_COMMAND_LINE"
    FROM_CODE = "FROM_CODE"

    def __str__(self) -> str:
        return self.value


class OptionValue(Generic[T]):
    """A value that is only replaced by an update of equal or higher precedence.

    A value set from the command line cannot be overridden from a file, and a
    value set from code cannot be overridden by either.
    """

    def __init__(self, value: T) -> None:
        self._value = value
        self._type = OptionValueType.DEFAULT

    def get(self) -> T:
        return self._value

    def type(self) -> OptionValueType:
        return self._type

    def set(self, value: T) -> None:
        """Set the value explicitly from code; this always takes effect."""
        self._value = value
        self._type = OptionValueType.FROM_CODE

    def set_from_command_line(self, value: T) -> None:
        """Set the value from a command-line argument unless set from code."""
        if self._type is not OptionValueType.FROM_CODE:
            self._value = value
            self._type = OptionValueType.FROM_COMMAND_LINE

    def set_from_file(self, value: T) -> None:
        """Set the value from a file unless set from the command line or code."""
        if self._type in (OptionValueType.DEFAULT, OptionValueType.FROM_FILE):
            self._value = value
            self._type = OptionValueType.FROM_FILE

    def __repr__(self) -> str:
        return f"OptionValue({self._value!r}, {self._type})"