# src/adlistctl/blocker/list_file.py
import logging
from contextlib import suppress

from ..errors import AdlistFileError

logger = logging.getLogger(__name__)


def _reason(exc):
    return getattr(exc, "strerror", None) or str(exc)


def load_list(path):
    """Read the whole adlists file as UTF-8, line endings untouched."""
    try:
        f = open(path, "r", encoding="utf-8", newline="")
    except OSError as exc:
        raise AdlistFileError("open", path, _reason(exc)) from exc

    try:
        content = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        with suppress(OSError):
            f.close()
        raise AdlistFileError("read", path, _reason(exc)) from exc

    try:
        f.close()
    except OSError as exc:
        raise AdlistFileError("close", path, _reason(exc)) from exc

    logger.debug("Loaded %d characters from %s", len(content), path)
    return content


def save_list(path, content):
    """Truncate the adlists file and write `content`. A failed close counts as a failed write."""
    try:
        f = open(path, "w", encoding="utf-8", newline="")
    except OSError as exc:
        raise AdlistFileError("open", path, _reason(exc)) from exc

    try:
        f.write(content)
    except OSError as exc:
        with suppress(OSError):
            f.close()
        raise AdlistFileError("write", path, _reason(exc)) from exc

    try:
        f.close()
    except OSError as exc:
        raise AdlistFileError("close", path, _reason(exc)) from exc

    logger.debug("Wrote %d characters to %s", len(content), path)
