"""TOML text codec for GradientSettings.

Settings live in a ``[gradient]`` table::

    [gradient]
    palette = "INCANDESCENT"
    reverse = true

Flat keys at the top level are accepted as well; the table wins on conflict.
"""

from __future__ import annotations

import logging

import tomlkit

from domain.models import GradientSettings

logger = logging.getLogger(__name__)

SECTION = 'gradient'


def settings_from_toml(text: str) -> GradientSettings:
    """Parse and validate TOML text -> GradientSettings."""
    data = tomlkit.parse(text).unwrap()
    section = data.pop(SECTION, None)
    flat = {k: v for k, v in data.items() if not isinstance(v, dict)}
    if isinstance(section, dict):
        flat.update(section)
    settings = GradientSettings.model_validate(flat)
    logger.info(
        'Gradient settings loaded: palette=%s reverse=%s lut_size=%d',
        settings.palette.value,
        settings.reverse,
        settings.lut_size,
    )
    return settings


def settings_to_toml(settings: GradientSettings) -> str:
    """Serialize GradientSettings to TOML text with a [gradient] table."""
    doc = tomlkit.document()
    table = tomlkit.table()
    for key, value in settings.model_dump(mode='json').items():
        table.add(key, value)
    doc.add(SECTION, table)
    return tomlkit.dumps(doc)
