# -*- coding: utf-8 -*-
import os
import json
import logging

from mep_equalize.geometry import PARALLEL_TOLERANCE

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = "equalize_settings.json"

DEFAULTS = {
    "distance": "1.0",          # last accepted dialog value, external units
    "units": "Meters",          # UnitTypeId name of the dialog value
    "tolerance": PARALLEL_TOLERANCE,
    "use_up_vector": False,     # derive the offset direction from Z x direction
}


def _coerce(key, value):
    default = DEFAULTS[key]
    if isinstance(default, bool):
        if hasattr(value, "strip"):  # str or IronPython unicode
            return value.strip().lower() in ("1", "true", "yes", "on")
        return bool(value)
    return type(default)(value)


def load_settings(path):
    """Defaults merged with the saved file. Missing or unreadable files give the defaults."""
    settings = dict(DEFAULTS)
    if not os.path.exists(path):
        return settings

    try:
        with open(path, "r") as f:
            saved = json.load(f)
    except (IOError, OSError, ValueError) as e:
        logger.warning("Could not read settings '%s': %s", path, e)
        return settings

    if not isinstance(saved, dict):
        logger.warning("Ignoring settings '%s': expected an object.", path)
        return settings

    for key in DEFAULTS:
        if key not in saved:
            continue
        try:
            settings[key] = _coerce(key, saved[key])
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid setting %s=%r", key, saved[key])
    return settings


def save_settings(path, settings):
    data = dict((key, settings.get(key, DEFAULTS[key])) for key in DEFAULTS)
    try:
        with open(path, "w") as f:
            json.dump(data, f, indent=2)
    except (IOError, OSError) as e:
        logger.warning("Could not save settings '%s': %s", path, e)
        return False
    return True
