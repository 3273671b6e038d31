"""Domain Entities."""

from apps.quest.domain.entities.condition import (
    AssetOwnershipCondition,
    Condition,
    DateCondition,
    LevelCondition,
    build_condition,
)

__all__ = [
    "AssetOwnershipCondition",
    "Condition",
    "DateCondition",
    "LevelCondition",
    "build_condition",
]
