"""Exceptions raised by adlistctl. Only the CLI turns them into exit codes."""

from __future__ import annotations

from pathlib import Path
from typing import Union


class AdlistError(Exception):
    pass


class AdlistFileError(AdlistError):
    """Opening, reading, writing or closing the adlists file failed."""

    def __init__(self, action: str, path: Union[str, Path], reason: str):
        self.action = action
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"could not {action} {self.path}: {reason}")


class RefreshError(AdlistError):
    """The refresh command could not be started."""
