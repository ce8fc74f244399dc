"""Domain enumerations for the FlowFill application.

Enums represent fixed sets of domain values (e.g. survey field kinds).
"""

from enum import Enum


class FieldKind(str, Enum):
    """Kind of answer a survey field collects.

    Stored by value; new kinds can be added without migrating existing rows.
    """

    STRING = "string"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid kind values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [kind.value for kind in cls]
