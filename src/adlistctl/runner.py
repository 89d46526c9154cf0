"""Load, edit, save and refresh: one pass per invocation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from adlistctl.blocker.adlist_editor import AdlistDocument, Outcome
from adlistctl.blocker.backup_helper import backup_list, restore_latest_backup
from adlistctl.blocker.config import ADLISTS_PATH, BACKUP_DIR, GRAVITY_COMMAND
from adlistctl.blocker.list_file import load_list, save_list
from adlistctl.gravity import Reloader, trigger_reload

logger = logging.getLogger(__name__)


class Settings(BaseModel):
    list_path: Path = ADLISTS_PATH
    add: List[str] = Field(default_factory=list)
    remove: List[str] = Field(default_factory=list)
    refresh: bool = True
    backup: bool = False
    backup_dir: Path = BACKUP_DIR
    gravity_command: List[str] = Field(default_factory=lambda: list(GRAVITY_COMMAND))

    @field_validator("add", "remove")
    @classmethod
    def _drop_blank_urls(cls, urls: List[str]) -> List[str]:
        cleaned = []
        for url in urls:
            url = url.strip()
            if not url:
                # an empty prefix would match every line
                logger.warning("Ignoring blank URL")
                continue
            cleaned.append(url)
        return cleaned


class UrlChange(BaseModel):
    url: str
    outcome: Outcome


class ChangeReport(BaseModel):
    changes: List[UrlChange] = Field(default_factory=list)
    backup_path: Optional[Path] = None
    refresh_output: Optional[str] = None

    @property
    def modified(self) -> bool:
        return any(c.outcome != Outcome.UNCHANGED for c in self.changes)


def apply_changes(settings: Settings, reload: Reloader = trigger_reload) -> ChangeReport:
    """
    Apply every add (in order), then every remove (in order), save once and
    refresh. A failed refresh leaves the saved file as is.
    """
    report = ChangeReport()
    doc = AdlistDocument.parse(load_list(settings.list_path))

    for url in settings.add:
        report.changes.append(UrlChange(url=url, outcome=doc.add(url)))
    for url in settings.remove:
        report.changes.append(UrlChange(url=url, outcome=doc.remove(url)))

    if settings.backup:
        report.backup_path = backup_list(settings.list_path, settings.backup_dir)
    save_list(settings.list_path, doc.render())

    if settings.refresh:
        report.refresh_output = reload(settings.gravity_command)
    return report


def restore(settings: Settings, reload: Reloader = trigger_reload) -> Optional[ChangeReport]:
    """Put the newest backup back in place and refresh. None when there is no backup."""
    restored = restore_latest_backup(settings.list_path, settings.backup_dir)
    if restored is None:
        return None
    report = ChangeReport(backup_path=restored)
    if settings.refresh:
        report.refresh_output = reload(settings.gravity_command)
    return report


def list_urls(settings: Settings):
    return AdlistDocument.parse(load_list(settings.list_path)).urls()
