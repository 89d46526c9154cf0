"""Refresh trigger: asks Pi-hole to rebuild gravity from the current adlists."""

from __future__ import annotations

import logging
import subprocess
from typing import Callable, Sequence

from adlistctl.blocker.config import GRAVITY_COMMAND
from adlistctl.errors import RefreshError

logger = logging.getLogger(__name__)

Reloader = Callable[[Sequence[str]], str]


def trigger_reload(command: Sequence[str] = GRAVITY_COMMAND) -> str:
    """Run `command` to completion and return its captured stdout.

    stderr is not captured and goes straight to the terminal. A non-zero
    exit status is logged but not raised; the list has already been saved
    by the time this runs.
    """
    logger.info("Running %s", " ".join(command))
    try:
        result = subprocess.run(list(command), stdout=subprocess.PIPE, text=True, check=False)
    except OSError as exc:
        raise RefreshError(f"could not run {command[0]}: {exc.strerror or exc}") from exc

    if result.returncode != 0:
        logger.warning("%s exited with status %s", command[0], result.returncode)
    return result.stdout
