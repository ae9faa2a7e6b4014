"""Sends purge tasks to Akamai."""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from contextlib import AbstractContextManager, nullcontext
from dataclasses import dataclass

import requests
from akamai.edgegrid import EdgeGridAuth

from akamai_purge_tools.errors import ApiError, PurgeToolError, TransportError
from akamai_purge_tools.models.credential import Credential
from akamai_purge_tools.models.purge_task import PurgeTask

log = logging.getLogger(__name__)

SUCCESS_STATUS = 201

HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


@dataclass(frozen=True)
class PurgeResult:
    task: PurgeTask
    status: int | None = None
    body: str = ""
    error: PurgeToolError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def new_session() -> requests.Session:
    return requests.Session()


def edgegrid_auth(credential: Credential) -> EdgeGridAuth:
    return EdgeGridAuth(
        client_token=credential.client_token,
        client_secret=credential.client_secret,
        access_token=credential.access_token,
    )


def send(task: PurgeTask, session: requests.Session, timeout: float) -> tuple[int, str]:
    """POST the task's payload. Returns status code and response body."""
    try:
        res = session.post(
            task.endpoint,
            data=task.payload().encode("utf-8"),
            headers=HEADERS,
            auth=edgegrid_auth(task.credential),
            timeout=timeout,
        )
    except requests.RequestException as e:
        raise TransportError(f"Something went wrong trying to purge Akamai cache: {e}") from e
    return res.status_code, res.text


def execute(task: PurgeTask, session: requests.Session, timeout: float) -> PurgeResult:
    """Send one task, errors are returned in the result."""
    log.info("Endpoint: %s; Items to purge: (%s)", task.endpoint, task.payload())

    try:
        status, body = send(task, session, timeout)
    except TransportError as e:
        log.error("%s", e)
        return PurgeResult(task=task, error=e)

    log.info("HTTP Status: %s", status)
    log.info("Akamai Purge Response: %s", body)

    if status != SUCCESS_STATUS:
        error = ApiError(status, body)
        log.error("Purge failed with status %s: %s", status, body)
        return PurgeResult(task=task, status=status, body=body, error=error)

    return PurgeResult(task=task, status=status, body=body)


def purge_all(
    tasks: Iterable[PurgeTask],
    session: requests.Session,
    timeout: float,
    progress: Callable[[PurgeTask], AbstractContextManager] | None = None,
) -> list[PurgeResult]:
    """Run tasks in order, stopping after the first failure."""
    results = []
    for task in tasks:
        with (progress(task) if progress else nullcontext()):
            result = execute(task, session, timeout)
        results.append(result)
        if not result.ok:
            break
    return results
