"""Akamai API credentials."""
from __future__ import annotations

import enum
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

from akamai_purge_tools.errors import IncompleteConfigError


class CredentialNamespace(enum.StrEnum):
    """Config key prefix of an API family."""

    FASTPURGE = "fastpurge"
    ECCU = "eccu"

    def key(self, field: str) -> str:
        return f"{self.value}_{field}"

    @property
    def keys(self) -> list[str]:
        return [self.key(field) for field in CREDENTIAL_FIELDS]


CREDENTIAL_FIELDS = ("host", "client_secret", "client_token", "access_token")


class Credential(BaseModel):
    host: str
    client_token: str
    client_secret: str
    access_token: str

    model_config = ConfigDict(frozen=True)

    def __repr__(self) -> str:
        # never leak the secrets into logs
        return f"Credential(host={self.host!r})"

    __str__ = __repr__


def resolve_credential(
    config: Mapping[str, str], namespace: CredentialNamespace
) -> Credential:
    """
    Build the credential for an API family from the config.
    Raises IncompleteConfigError if any of the four keys is missing or blank.
    """
    values = {
        field: (config.get(namespace.key(field)) or "").strip()
        for field in CREDENTIAL_FIELDS
    }

    missing = [namespace.key(field) for field, value in values.items() if not value]
    if missing:
        raise IncompleteConfigError(namespace.value, missing)

    return Credential(**values)
