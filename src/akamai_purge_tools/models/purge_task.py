"""
Purge tasks.

A task is one request against either the Fast Purge (CCU v3) API, which
invalidates urls, cache tags or CP codes almost immediately, or the ECCU v1
API, which invalidates whole directories with a delay of roughly 30 minutes.
"""
from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field

from akamai_purge_tools.errors import ConfigError
from akamai_purge_tools.models.credential import (
    Credential,
    CredentialNamespace,
    resolve_credential,
)
from akamai_purge_tools.models.purge_item import (
    PurgeItem,
    PurgeUrl,
    parse_cpcodes,
    parse_tags,
    parse_urls,
)
from akamai_purge_tools.utils import uris
from akamai_purge_tools.utils.config_file import MAIL_KEY
from akamai_purge_tools.utils.path_tree import build_path_tree, depth, iter_leaves, to_eccu_xml

log = logging.getLogger(__name__)


class PurgeTaskType(enum.StrEnum):
    URLS = "urls"
    URLS_RECURSIVE = "urls-recursive"
    CACHE_TAGS = "tags"
    CP_CODES = "cpcodes"


class PurgeTask(BaseModel):
    type: PurgeTaskType
    credential: Credential
    endpoint: str
    items: tuple[PurgeItem, ...]
    # ECCU only
    mail: str | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def key(self) -> tuple[PurgeTaskType, str]:
        """Identity of a task within a purge plan."""
        if self.type is PurgeTaskType.URLS_RECURSIVE:
            return self.type, self.items[0].host
        return self.type, ""

    def payload(self) -> str:
        """JSON request body."""
        body = variant_for(self.type).build_payload(self)
        return body.model_dump_json(by_alias=True, exclude_none=True)


class FastPurgeRequest(BaseModel):
    objects: list[str | int]


class EccuRequest(BaseModel):
    metadata: str
    property_name: str = Field(alias="propertyName")
    property_name_exact_match: bool = Field(alias="propertyNameExactMatch", default=True)
    property_type: str = Field(alias="propertyType", default="HOST_HEADER")
    status_update_emails: list[str] | None = Field(alias="statusUpdateEmails", default=None)


def fast_purge_payload(task: PurgeTask) -> FastPurgeRequest:
    objects = [str(item) if isinstance(item, PurgeUrl) else item for item in task.items]
    return FastPurgeRequest(objects=objects)


def eccu_payload(task: PurgeTask) -> EccuRequest:
    tree = build_path_tree(item.segments for item in task.items)
    log.debug(
        "Consolidated paths for %s (depth %d): %s",
        task.items[0].host,
        depth(tree),
        ", ".join("/" + "/".join(leaf) for leaf in iter_leaves(tree)),
    )

    mail = (task.mail or "").strip()
    return EccuRequest(
        metadata=to_eccu_xml(tree),
        propertyName=task.items[0].host,
        statusUpdateEmails=[mail] if mail else None,
    )


class TaskVariant(NamedTuple):
    namespace: CredentialNamespace
    endpoint_path: str
    parse_items: Callable[[Iterable[str]], list]
    build_payload: Callable[[PurgeTask], BaseModel]


VARIANTS: dict[PurgeTaskType, TaskVariant] = {
    PurgeTaskType.URLS: TaskVariant(
        CredentialNamespace.FASTPURGE,
        "ccu/v3/invalidate/url/production",
        parse_urls,
        fast_purge_payload,
    ),
    PurgeTaskType.URLS_RECURSIVE: TaskVariant(
        CredentialNamespace.ECCU,
        "eccu-api/v1/requests",
        parse_urls,
        eccu_payload,
    ),
    PurgeTaskType.CACHE_TAGS: TaskVariant(
        CredentialNamespace.FASTPURGE,
        "ccu/v3/invalidate/tag/production",
        parse_tags,
        fast_purge_payload,
    ),
    PurgeTaskType.CP_CODES: TaskVariant(
        CredentialNamespace.FASTPURGE,
        "ccu/v3/invalidate/cpcode/production",
        parse_cpcodes,
        fast_purge_payload,
    ),
}


def variant_for(task_type: PurgeTaskType) -> TaskVariant:
    try:
        return VARIANTS[task_type]
    except KeyError:
        raise ValueError(f"Unknown purge task type: {task_type!r}") from None


def build_endpoint(task_type: PurgeTaskType, credential: Credential) -> str:
    try:
        return uris.https_url(credential.host, variant_for(task_type).endpoint_path)
    except ValueError as e:
        raise ConfigError(f"Provided host address is invalid: {e}") from e


def group_by_host(urls: Sequence[PurgeUrl]) -> dict[str, list[PurgeUrl]]:
    """Group urls by host, in order of first appearance."""
    groups: dict[str, list[PurgeUrl]] = {}
    for url in urls:
        groups.setdefault(url.host, []).append(url)
    return groups


def build_tasks(
    task_type: PurgeTaskType,
    config: Mapping[str, str],
    raw_items: Sequence[str],
) -> list[PurgeTask]:
    """
    Validate raw items and build the tasks for one task type.
    ECCU accepts a single host per request, so recursive url purges
    are split into one task per host.
    """
    variant = variant_for(task_type)
    credential = resolve_credential(config, variant.namespace)
    endpoint = build_endpoint(task_type, credential)
    items = variant.parse_items(raw_items)

    if not items:
        return []

    if task_type is PurgeTaskType.URLS_RECURSIVE:
        batches = list(group_by_host(items).values())
        mail = config.get(MAIL_KEY)
    else:
        batches = [items]
        mail = None

    return [
        PurgeTask(
            type=task_type,
            credential=credential,
            endpoint=endpoint,
            items=tuple(batch),
            mail=mail,
        )
        for batch in batches
    ]


def dedupe_tasks(tasks: Iterable[PurgeTask]) -> tuple[PurgeTask, ...]:
    """Ordered set of tasks by key, first one wins."""
    result: dict[tuple[PurgeTaskType, str], PurgeTask] = {}
    for task in tasks:
        result.setdefault(task.key, task)
    return tuple(result.values())


def plan_tasks(
    config: Mapping[str, str],
    requested: Iterable[tuple[PurgeTaskType, Sequence[str]]],
) -> tuple[PurgeTask, ...]:
    """Build every requested task up front, before anything is sent."""
    tasks = []
    for task_type, raw_items in requested:
        tasks.extend(build_tasks(task_type, config, raw_items))
    return dedupe_tasks(tasks)
