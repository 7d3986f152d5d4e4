"""Domain layer - grid settings and profiles."""
from domain.models import GridSettings
from domain.profiles import load_profile, load_settings, save_profile

__all__ = [
    'GridSettings',
    'load_profile',
    'load_settings',
    'save_profile',
]
