import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(verbose: bool = False) -> None:
    """Route all logging through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                show_path=verbose,
                rich_tracebacks=verbose,
            )
        ],
        force=True,
    )
    # urllib3 is noisy on debug
    logging.getLogger("urllib3").setLevel(logging.WARNING)
