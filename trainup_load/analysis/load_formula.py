"""Session training load formula (RPE x duration x emotional x type)."""

from enum import Enum
from types import MappingProxyType
from typing import Union


class TrainingType(Enum):
    """Training session types recorded by athletes."""

    FIELD = "Field"
    GYM = "Gym"
    MATCH = "Match"


# Shared by every load calculation; read-only so all callers stay identical
TYPE_COEFF = MappingProxyType({
    TrainingType.FIELD: 1.2,
    TrainingType.GYM: 1.0,
    TrainingType.MATCH: 1.5,
})

EMO_STEP = 0.125  # emotional load 1 -> 1.0, 2 -> 1.125, ... 5 -> 1.5


def normalize_training_type(label: Union[str, TrainingType]) -> TrainingType:
    """Map a form label such as "Field Training" or "Gym" to a TrainingType.

    Anything that is neither a field nor a gym label counts as a match.
    """
    if isinstance(label, TrainingType):
        return label

    label = label.strip().lower()
    if label.startswith("field"):
        return TrainingType.FIELD
    if label.startswith("gym"):
        return TrainingType.GYM
    return TrainingType.MATCH


def emotional_load_to_coeff(emotional_load: float) -> float:
    """Convert emotional load (1-5) to a coefficient (1.0-1.5)."""
    return 1.0 + (emotional_load - 1) * EMO_STEP


def compute_session_load(
    rpe: float,
    duration_minutes: float,
    emotional_load: float,
    training_type: Union[str, TrainingType],
) -> float:
    """Calculate the training load of a single session in arbitrary units.

    load = RPE * duration * emotional coefficient * type coefficient

    Inputs are not validated; range checks belong to the caller. The result
    is not rounded.

    Args:
        rpe: Rate of perceived exertion (1-10)
        duration_minutes: Session duration in minutes
        emotional_load: Emotional load rating (1-5)
        training_type: TrainingType or its label ("Field", "Gym", "Match")

    Returns:
        Session load (AU)
    """
    emotional_coeff = emotional_load_to_coeff(emotional_load)
    type_coeff = TYPE_COEFF[normalize_training_type(training_type)]
    return rpe * duration_minutes * emotional_coeff * type_coeff
