import yaspin
from yaspin.core import Yaspin

from akamai_purge_tools.models.purge_task import PurgeTask


def purge_spinner(task: PurgeTask) -> Yaspin:
    """Spinner shown while a purge request is in flight."""
    count = len(task.items)
    return yaspin.yaspin(
        text=f"Purging {count} {task.type} item{'s' if count != 1 else ''}...",
        timer=True,
    )
