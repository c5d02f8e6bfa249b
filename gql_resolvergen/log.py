"""Package logger.

The library only emits records; ``setup_logging`` installs a rich console
handler and is called by the CLI.
"""

import logging

from rich.logging import RichHandler

log = logging.getLogger("gql_resolvergen")


def setup_logging(verbose: bool = False) -> None:
    """Attach a RichHandler to the package logger (idempotent)."""
    level = logging.DEBUG if verbose else logging.INFO
    log.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in log.handlers):
        handler = RichHandler(rich_tracebacks=True, show_time=False, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        log.addHandler(handler)
