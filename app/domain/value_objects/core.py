"""Domain value objects for the FlowFill application.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class FilterCondition:
    """Conditional gate keyed to a field or criteria value.

    ``name`` is a field machine key or a criteria category; the condition
    holds when that entity's current value equals ``value`` exactly
    (case-sensitive). References are by key, not by id, so they survive
    template cloning unchanged.
    """

    name: str
    value: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Filter name must be a non-empty string")

    def is_satisfied_by(self, values: Mapping[str, str | None]) -> bool:
        """Return True if the referenced key is present and equals the required value.

        A key missing from ``values`` (or mapped to None) never matches.
        """
        current = values.get(self.name)
        return current is not None and current == self.value
