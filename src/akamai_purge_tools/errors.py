"""Error types raised by purge tools."""
from __future__ import annotations


class PurgeToolError(Exception):
    """Base class for all expected failures."""


class ConfigError(PurgeToolError):
    """Config file missing, unreadable, or unusable."""


class IncompleteConfigError(ConfigError):
    def __init__(self, namespace: str, missing: list[str]):
        self.namespace = namespace
        self.missing = missing
        super().__init__(
            f"Provided Akamai config is incomplete ({namespace}), "
            f"missing: {', '.join(missing)}"
        )


class ArgumentError(PurgeToolError):
    """Invalid combination of command line arguments."""


class ValidationError(PurgeToolError):
    """Purge items could not be validated."""


class MalformedUrlError(ValidationError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Provided URL is malformed: {value!r}")


class InvalidCpCodeError(ValidationError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Provided CP code is not a number: {value!r}")


class TransportError(PurgeToolError):
    """Network or IO failure while sending a request."""


class ApiError(PurgeToolError):
    def __init__(self, status: int, body: str):
        self.status = status
        self.body = body
        super().__init__(f"Akamai API responded with status {status}: {body}")
