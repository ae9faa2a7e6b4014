"""Akamai config file (key=value properties)."""
from __future__ import annotations

import io
import logging
from collections.abc import Mapping
from pathlib import Path

import dotenv

from akamai_purge_tools.errors import ConfigError

log = logging.getLogger(__name__)

MAIL_KEY = "mail"


def load_config(path: Path | str) -> dict[str, str]:
    """Load a flat key=value config file. Keys without value are dropped."""
    path = Path(path)
    if not path.is_file():
        raise ConfigError(f"Config file {str(path)!r} does not exist.")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Unable to process provided config file: {e}") from e

    values = dotenv.dotenv_values(stream=io.StringIO(text), interpolate=False)
    config = {key: value for key, value in values.items() if value is not None}
    log.debug("Loaded %d config keys from %s", len(config), path)
    return config


def with_mail(config: Mapping[str, str], mail: str | None) -> dict[str, str]:
    """Copy of config with the notification mail overridden, if given."""
    result = dict(config)
    if mail and mail.strip():
        result[MAIL_KEY] = mail.strip()
    return result
