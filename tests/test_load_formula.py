"""Tests for the session training load formula."""

import pytest
from trainup_load.analysis.load_formula import (
    TYPE_COEFF,
    TrainingType,
    compute_session_load,
    emotional_load_to_coeff,
    normalize_training_type,
)


class TestEmotionalCoefficient:
    """Test emotional load to coefficient mapping."""

    def test_linear_steps(self):
        """Each emotional load unit adds 0.125."""
        assert emotional_load_to_coeff(1) == 1.0
        assert emotional_load_to_coeff(2) == 1.125
        assert emotional_load_to_coeff(3) == 1.25
        assert emotional_load_to_coeff(4) == 1.375
        assert emotional_load_to_coeff(5) == 1.5


class TestTypeCoefficients:
    """Test training type coefficients."""

    def test_fixed_values(self):
        """Coefficients match the shared table."""
        assert TYPE_COEFF[TrainingType.FIELD] == 1.2
        assert TYPE_COEFF[TrainingType.GYM] == 1.0
        assert TYPE_COEFF[TrainingType.MATCH] == 1.5

    def test_table_is_read_only(self):
        """The coefficient table cannot be modified at runtime."""
        with pytest.raises(TypeError):
            TYPE_COEFF[TrainingType.GYM] = 2.0

    def test_normalize_labels(self):
        """Form labels map to training types by prefix."""
        assert normalize_training_type("Field Training") == TrainingType.FIELD
        assert normalize_training_type("Gym Training") == TrainingType.GYM
        assert normalize_training_type("Match/Game") == TrainingType.MATCH
        assert normalize_training_type("gym") == TrainingType.GYM
        assert normalize_training_type(" FIELD ") == TrainingType.FIELD
        assert normalize_training_type("Recovery") == TrainingType.MATCH
        assert normalize_training_type(TrainingType.GYM) == TrainingType.GYM


class TestComputeSessionLoad:
    """Test session load calculation."""

    def test_field_session(self):
        """7 RPE x 90 min x 1.25 x 1.2 = 945 AU."""
        load = compute_session_load(7, 90, 3, TrainingType.FIELD)
        assert load == pytest.approx(945)

    def test_accepts_type_label(self):
        """String labels give the same load as the enum."""
        assert compute_session_load(7, 90, 3, "Field") == compute_session_load(7, 90, 3, TrainingType.FIELD)

    def test_gym_and_match(self):
        """Gym is neutral, matches weigh 1.5."""
        assert compute_session_load(5, 60, 1, TrainingType.GYM) == pytest.approx(300)
        assert compute_session_load(10, 90, 5, TrainingType.MATCH) == pytest.approx(2025)

    def test_not_rounded(self):
        """Loads keep their fractional part."""
        load = compute_session_load(3, 7, 2, TrainingType.GYM)
        assert load == pytest.approx(23.625)

    def test_no_validation(self):
        """Invalid inputs produce a value rather than an error."""
        load = compute_session_load(5, -30, 3, TrainingType.GYM)
        assert load < 0
