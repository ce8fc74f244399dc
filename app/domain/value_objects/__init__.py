"""Domain value objects and shared value types."""

from app.domain.value_objects.core import FilterCondition

__all__ = [
    "FilterCondition",
]
