"""Akamai purge command."""
from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, Callable, Optional, ParamSpec, TypeVar

import typer
from rich import print as cp, print_json
from typer import Option

from akamai_purge_tools.errors import ArgumentError, PurgeToolError
from akamai_purge_tools.models.purge_task import PurgeTask, PurgeTaskType, plan_tasks
from akamai_purge_tools.models.settings import env
from akamai_purge_tools.utils.config_file import load_config, with_mail
from akamai_purge_tools.utils.dispatcher import new_session, purge_all
from akamai_purge_tools.utils.log import configure_logging
from akamai_purge_tools.utils.spinners import purge_spinner

T = TypeVar("T")
P = ParamSpec("P")

ConfigFileType = Annotated[
    Path,
    Option("--config-file", "-c", help="Path to the Akamai config file"),
]


def attempt(func: Callable[P, T], *args: Any) -> T:
    try:
        return func(*args)
    except ArgumentError as e:
        cp(f"❌  {e}")
        raise typer.Exit(2)
    except PurgeToolError as e:
        if env.verbose:
            raise
        cp(f"❌  Error: {e}")
        raise typer.Exit(1)


def split_items(value: str | None) -> list[str]:
    """Split a comma-separated option value."""
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def requested_tasks(
    urls: str | None,
    tags: str | None,
    cpcodes: str | None,
    recursive: bool,
) -> list[tuple[PurgeTaskType, list[str]]]:
    """Map command line options to task types with their raw items."""
    if recursive and not urls:
        raise ArgumentError("--recursive can only be used together with --urls.")

    requested = []
    if urls:
        task_type = PurgeTaskType.URLS_RECURSIVE if recursive else PurgeTaskType.URLS
        requested.append((task_type, split_items(urls)))
    if tags:
        requested.append((PurgeTaskType.CACHE_TAGS, split_items(tags)))
    if cpcodes:
        requested.append((PurgeTaskType.CP_CODES, split_items(cpcodes)))

    if not any(items for _, items in requested):
        raise ArgumentError("Nothing to purge, provide --urls, --tags or --cpcodes.")
    return requested


def prepare(
    config_file: Path,
    urls: str | None,
    tags: str | None,
    cpcodes: str | None,
    recursive: bool,
    mail: str | None,
) -> tuple[PurgeTask, ...]:
    requested = requested_tasks(urls, tags, cpcodes, recursive)
    config = with_mail(load_config(config_file), mail)
    return plan_tasks(config, requested)


def print_task(task: PurgeTask):
    cp(f"[bold]{task.type}[/bold] -> {task.endpoint}")
    print_json(task.payload())


def purge(
    config_file: ConfigFileType,
    urls: Annotated[Optional[str], Option("--urls", "-u", help="Comma-separated URLs to purge")] = None,
    tags: Annotated[Optional[str], Option("--tags", "-t", help="Comma-separated cache tags to purge")] = None,
    cpcodes: Annotated[Optional[str], Option("--cpcodes", help="Comma-separated CP codes to purge")] = None,
    recursive: Annotated[bool, Option("--recursive", "-r", help="Invalidate sub-paths of --urls recursively")] = False,
    mail: Annotated[Optional[str], Option("--mail", "-m", help="E-Mail address for notification (recursive only)")] = None,
    dry_run: Annotated[bool, Option("--dry-run", help="Print requests without sending")] = False,
):
    """Invalidate URLs, cache tags, CP codes or directories on Akamai."""
    configure_logging(env.verbose)

    tasks = attempt(prepare, config_file, urls, tags, cpcodes, recursive, mail)

    if dry_run:
        for task in tasks:
            print_task(task)
        cp(f"Dry run, {len(tasks)} request(s) not sent.")
        return

    with new_session() as session:
        results = purge_all(tasks, session, env.request_timeout, progress=purge_spinner)

    for result in results:
        if result.ok:
            cp(f"✅  {result.task.type} purged ({result.status})")
        else:
            cp(f"❌  {result.task.type} failed: {result.error}")
            raise typer.Exit(1)
