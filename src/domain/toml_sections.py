"""
Sectioned TOML layout for GridSettings profiles.

GridSettings stays flat. On disk the fields are grouped::

    [grid]
    width = 10
    height = 10
    smooth = true

    [transform]
    origin_x = 0.0
    origin_y = 0.0
    step_x = 1.0
    step_y = 1.0
"""

from __future__ import annotations

# flat field -> (section, key inside the section)
FIELD_KEYS: dict[str, tuple[str, str]] = {
    'width': ('grid', 'width'),
    'height': ('grid', 'height'),
    'smooth': ('grid', 'smooth'),
    'x_origin': ('transform', 'origin_x'),
    'y_origin': ('transform', 'origin_y'),
    'x_step': ('transform', 'step_x'),
    'y_step': ('transform', 'step_y'),
}

_KEY_FIELDS = {location: field for field, location in FIELD_KEYS.items()}


def flat_to_sectioned(flat: dict) -> dict:
    """Group flat GridSettings fields into TOML sections for saving."""
    result: dict = {}
    for field, value in flat.items():
        section, key = FIELD_KEYS.get(field, ('common', field))
        result.setdefault(section, {})[key] = value
    return result


def sectioned_to_flat(data: dict) -> dict:
    """
    Flatten a parsed profile for GridSettings validation.

    Section keys are translated back to field names. Keys of unknown
    sections and top-level keys of an already flat profile pass through.
    """
    flat: dict = {}
    for name, value in data.items():
        if not isinstance(value, dict):
            flat[name] = value
            continue
        for key, item in value.items():
            flat[_KEY_FIELDS.get((name, key), key)] = item
    return flat
