"""Tests for domain models."""

import math

import pytest
from pydantic import ValidationError

from domain.models import GridSettings


def create_settings(**overrides):
    """Create GridSettings for a 10x10 grid with optional overrides."""
    defaults = {'width': 10, 'height': 10}
    defaults.update(overrides)
    return GridSettings(**defaults)


class TestGridSettingsValidators:
    """Tests for GridSettings validators."""

    def test_defaults(self):
        """Smoothing is on and the transform is the identity by default."""
        settings = create_settings()
        assert settings.smooth is True
        assert (settings.x_origin, settings.y_origin) == (0.0, 0.0)
        assert (settings.x_step, settings.y_step) == (1.0, 1.0)
        assert settings.is_identity_transform

    @pytest.mark.parametrize('field', ['width', 'height'])
    def test_zero_dimension(self, field):
        """Zero dimensions should raise ValueError."""
        with pytest.raises(ValueError):
            create_settings(**{field: 0})

    def test_negative_dimension(self):
        with pytest.raises(ValidationError):
            create_settings(width=-3)

    @pytest.mark.parametrize('field', ['x_origin', 'y_origin', 'x_step', 'y_step'])
    def test_non_finite_transform(self, field):
        """Origins and steps must be finite."""
        with pytest.raises(ValidationError):
            create_settings(**{field: math.inf})
        with pytest.raises(ValidationError):
            create_settings(**{field: math.nan})

    def test_unknown_keys_ignored(self):
        """Unknown keys from profiles are ignored."""
        settings = GridSettings.model_validate({'width': 2, 'height': 2, 'colour': 'red'})
        assert not hasattr(settings, 'colour')


class TestGridSettingsBehaviour:
    """Tests for derived values and immutability."""

    def test_frozen(self):
        settings = create_settings()
        with pytest.raises(ValidationError):
            settings.width = 5

    def test_model_copy(self):
        settings = create_settings()
        moved = settings.model_copy(update={'x_origin': 5.0})
        assert moved.x_origin == 5.0
        assert settings.x_origin == 0.0
        assert not moved.is_identity_transform

    def test_transform_point(self):
        settings = create_settings(x_origin=100.0, y_origin=200.0, x_step=2.0, y_step=0.5)
        assert settings.transform_point((3.0, 4.0)) == (106.0, 202.0)

    def test_identity_transform_point(self):
        assert create_settings().transform_point((1.5, 2.5)) == (1.5, 2.5)
