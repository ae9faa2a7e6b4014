"""Configuration"""
from __future__ import annotations

import json
from collections.abc import Mapping

import rich
import typer

from akamai_purge_tools.models.credential import CredentialNamespace
from akamai_purge_tools.purge import ConfigFileType, attempt
from akamai_purge_tools.utils.config_file import MAIL_KEY, load_config

app = typer.Typer(no_args_is_help=True)
cp = rich.print


def known_keys() -> list[str]:
    keys = []
    for namespace in CredentialNamespace:
        keys.extend(namespace.keys)
    keys.append(MAIL_KEY)
    return keys


def to_keys_json(config: Mapping[str, str]) -> str:
    """Summarize which config keys are set, without their values."""
    result = {}
    for key in known_keys():
        if key in config:
            if config[key].strip():
                # valid key
                result[key] = "********"
            else:
                # empty key
                result[key] = ""
        else:
            # missing key
            result[key] = "(not set)"

    return json.dumps(result, indent=2)


@app.command()
def show(config_file: ConfigFileType):
    """Show which keys of a config file are set."""
    config = attempt(load_config, config_file)
    cp(to_keys_json(config))
