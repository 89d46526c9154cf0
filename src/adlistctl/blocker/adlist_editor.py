# src/adlistctl/blocker/adlist_editor.py
import logging
from dataclasses import replace
from enum import Enum
from typing import List, Tuple

from .config import COMMENT_MARK
from .entries import Active, Disabled, Entry, parse_entries, render_entries

logger = logging.getLogger(__name__)


class Outcome(str, Enum):
    APPENDED = "appended"
    ENABLED = "enabled"
    DISABLED = "disabled"
    UNCHANGED = "unchanged"


class AdlistDocument:
    """In-memory adlists file. Edits only ever touch lines matching the target URL."""

    def __init__(self, entries: List[Entry]):
        self.entries = list(entries)

    @classmethod
    def parse(cls, content: str) -> "AdlistDocument":
        return cls(parse_entries(content))

    def render(self) -> str:
        return render_entries(self.entries)

    def add(self, url: str) -> Outcome:
        """
        Make `url` active: no-op if an active line already starts with it,
        otherwise uncomment the first disabled match, otherwise append it.
        """
        if any(isinstance(e, Active) and e.matches(url) for e in self.entries):
            logger.debug("%s is already enabled", url)
            return Outcome.UNCHANGED

        for i, entry in enumerate(self.entries):
            if isinstance(entry, Disabled) and entry.matches(url):
                self.entries[i] = entry.enable()
                logger.info("Enabled %s", url)
                return Outcome.ENABLED

        if self.entries and not self.entries[-1].ending:
            self.entries[-1] = replace(self.entries[-1], ending="\n")
        self.entries.append(Active(text=url))
        logger.info("Appended %s", url)
        return Outcome.APPENDED

    def remove(self, url: str) -> Outcome:
        """Comment out every active line starting with `url`."""
        changed = 0
        for i, entry in enumerate(self.entries):
            if isinstance(entry, Active) and entry.matches(url):
                self.entries[i] = entry.disable()
                changed += 1

        if not changed:
            logger.debug("%s is absent or already disabled", url)
            return Outcome.UNCHANGED
        logger.info("Disabled %s (%d line(s))", url, changed)
        return Outcome.DISABLED

    def urls(self) -> List[Tuple[str, bool]]:
        """(url, enabled) for every URL-bearing line, in file order."""
        found = []
        for entry in self.entries:
            if isinstance(entry, Active):
                text = entry.text.strip()
                if not text.startswith(COMMENT_MARK):
                    found.append((text, True))
                    continue
                # indented comment: inert for the blocker, never matched by edits
                body = text[len(COMMENT_MARK):].lstrip()
            elif isinstance(entry, Disabled):
                body = entry.body.strip()
            else:
                continue
            # plain comments are not list entries
            if body and "://" in body.split()[0]:
                found.append((body, False))
        return found


def add_url(content: str, url: str) -> str:
    doc = AdlistDocument.parse(content)
    doc.add(url)
    return doc.render()


def remove_url(content: str, url: str) -> str:
    doc = AdlistDocument.parse(content)
    doc.remove(url)
    return doc.render()
