import logging
from pathlib import Path

import tomlkit

from domain.models import GridSettings
from domain.toml_sections import flat_to_sectioned, sectioned_to_flat

logger = logging.getLogger(__name__)


def load_profile(path: str | Path) -> dict:
    """
    Read a TOML profile into a flat settings dict.

    The dict is not validated: the caller may still add keys (grid
    dimensions, for instance) before building GridSettings from it.
    """
    path = Path(path)
    if not path.exists():
        msg = f'Profile not found: {path}'
        raise FileNotFoundError(msg)
    data = tomlkit.parse(path.read_text(encoding='utf-8')).unwrap()
    flat = sectioned_to_flat(data)
    logger.debug('Profile %s: %s', path, flat)
    return flat


def load_settings(path: str | Path) -> GridSettings:
    """Load and validate a TOML profile -> GridSettings."""
    return GridSettings.model_validate(load_profile(path))


def save_profile(path: str | Path, settings: GridSettings) -> Path:
    """Write settings to a sectioned TOML profile."""
    path = Path(path)
    text = tomlkit.dumps(flat_to_sectioned(settings.model_dump()))
    path.write_text(text, encoding='utf-8')
    logger.info('Profile saved: %s', path)
    return path
