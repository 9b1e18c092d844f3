"""Tri-state update directives for optional card fields."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class UpdateAction(str, Enum):
    """What an update does to an optional field."""

    LEAVE = "leave"  # Keep the current value
    CLEAR = "clear"  # Unset the field
    SET = "set"  # Replace with a new value


@dataclass(frozen=True)
class FieldUpdate:
    """Update directive for one optional field.

    Distinguishes "leave unchanged" from "clear" without nesting optionals.
    """

    action: UpdateAction = UpdateAction.LEAVE
    value: str | None = None

    @classmethod
    def leave(cls) -> FieldUpdate:
        return cls(UpdateAction.LEAVE)

    @classmethod
    def clear(cls) -> FieldUpdate:
        return cls(UpdateAction.CLEAR)

    @classmethod
    def set(cls, value: str) -> FieldUpdate:
        return cls(UpdateAction.SET, value)

    @classmethod
    def from_input(cls, value: str) -> FieldUpdate:
        """Build a directive from form input: blank clears, text sets."""
        if value.strip():
            return cls.set(value)
        return cls.clear()

    @property
    def changes(self) -> bool:
        """Whether applying this directive touches the field."""
        return self.action != UpdateAction.LEAVE

    def apply(self, current: str | None) -> str | None:
        """Return the field value after applying this directive."""
        if self.action == UpdateAction.SET:
            return self.value
        if self.action == UpdateAction.CLEAR:
            return None
        return current
