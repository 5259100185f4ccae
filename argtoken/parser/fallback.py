# Argtoken — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `FallbackSlot` and `FallbackPolicy`, the 2x2 table of default values
used when a flag is given without a usable value.

The table is keyed by whether the flag was negated and whether its value was
explicitly blank:

                    no value (`--key`)   empty value (`--key=`)
    not negated     ENABLED              DISABLED_EMPTY
    negated         DISABLED             ENABLED_EMPTY

Blanking the value of a negated flag cancels the negation, so the empty-value
column is crossed.

Slot names accept config-friendly spellings, so `FallbackSlot("enabledEmpty")`,
`FallbackSlot("enabled-empty")` and `FallbackSlot.ENABLED_EMPTY` are the same.
"""
from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class FallbackSlot(Enum):
    """
    One cell of the fallback table.

    Members:
        ENABLED: `--key`, not negated and no value.
        DISABLED: `--no-key`, negated and no value.
        ENABLED_EMPTY: `--no-key=`, negated with an empty value.
        DISABLED_EMPTY: `--key=`, not negated with an empty value.
    """

    ENABLED = "enabled"
    DISABLED = "disabled"
    ENABLED_EMPTY = "enabled_empty"
    DISABLED_EMPTY = "disabled_empty"

    @classmethod
    def for_state(cls, inverted: bool, empty: bool) -> FallbackSlot:
        """Return the slot that applies to a token's negation and emptiness."""
        return _SLOT_TABLE[(inverted, empty)]

    @classmethod
    def _missing_(cls, value: object) -> FallbackSlot:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().replace("-", "_")
        if normalized.endswith("Empty"):
            normalized = f"{normalized[:-5]}_empty"
        normalized = normalized.lower()
        for member in cls:
            if member.value == normalized:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value


_SLOT_TABLE: dict[tuple[bool, bool], FallbackSlot] = {
    (False, False): FallbackSlot.ENABLED,
    (True, False): FallbackSlot.DISABLED,
    (False, True): FallbackSlot.DISABLED_EMPTY,
    (True, True): FallbackSlot.ENABLED_EMPTY,
}


class FallbackPolicy:
    """
    Read-only mapping of `FallbackSlot` to a fallback value.

    A slot that is absent or holds `None` means "no fallback, fail".

    Example:
        FallbackPolicy(enabled=1, disabled=-1)
        FallbackPolicy.from_mapping({"enabledEmpty": "", "disabled_empty": ""})
    """

    def __init__(
        self,
        enabled: Any = None,
        disabled: Any = None,
        enabled_empty: Any = None,
        disabled_empty: Any = None,
    ) -> None:
        values = {
            FallbackSlot.ENABLED: enabled,
            FallbackSlot.DISABLED: disabled,
            FallbackSlot.ENABLED_EMPTY: enabled_empty,
            FallbackSlot.DISABLED_EMPTY: disabled_empty,
        }
        self._slots: Mapping[FallbackSlot, Any] = MappingProxyType(
            {slot: value for slot, value in values.items() if value is not None}
        )

    @property
    def slots(self) -> Mapping[FallbackSlot, Any]:
        return self._slots

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Any] | None) -> FallbackPolicy:
        """
        Build a policy from a mapping keyed by `FallbackSlot` or slot name.

        Raises:
            ValueError: If a key does not name a slot.
        """
        if not mapping:
            return cls()
        values: dict[str, Any] = {}
        for key, value in mapping.items():
            slot = key if isinstance(key, FallbackSlot) else FallbackSlot(key)
            values[slot.value] = value
        return cls(**values)

    @classmethod
    def coerce(
        cls, policy: FallbackPolicy | Mapping[Any, Any] | None
    ) -> FallbackPolicy:
        """Return `policy` as a `FallbackPolicy`, converting mappings and `None`."""
        if isinstance(policy, FallbackPolicy):
            return policy
        return cls.from_mapping(policy)

    def get(self, slot: FallbackSlot) -> Any:
        """Return the fallback for `slot`, or None when the slot is absent."""
        return self.slots.get(slot)

    def has(self, slot: FallbackSlot) -> bool:
        return slot in self.slots

    def __bool__(self) -> bool:
        return bool(self.slots)

    def _typed_slots(self) -> dict[FallbackSlot, tuple[type, Any]]:
        return {slot: (type(value), value) for slot, value in self.slots.items()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FallbackPolicy):
            return NotImplemented
        return self._typed_slots() == other._typed_slots()

    def __hash__(self) -> int:
        # slot values may be unhashable
        return hash(
            tuple(
                sorted(
                    (slot.value, type(value).__module__, type(value).__qualname__)
                    for slot, value in self.slots.items()
                )
            )
        )

    def __repr__(self) -> str:
        inner = ", ".join(f"{slot.value}={value!r}" for slot, value in self.slots.items())
        return f"FallbackPolicy({inner})"
