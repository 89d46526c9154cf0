# src/adlistctl/blocker/backup_helper.py
import logging
import shutil
from datetime import datetime

from ..errors import AdlistFileError
from .config import ADLISTS_PATH, BACKUP_DIR

logger = logging.getLogger(__name__)


def backup_list(list_path=ADLISTS_PATH, backup_dir=BACKUP_DIR):
    backup_dir.mkdir(parents=True, exist_ok=True)
    stamp = f"{datetime.now():%Y%m%d_%H%M%S_%f}"
    backup_path = backup_dir / f"adlists_{stamp}.bak"
    n = 1
    while backup_path.exists():
        backup_path = backup_dir / f"adlists_{stamp}_{n}.bak"
        n += 1
    try:
        shutil.copy(list_path, backup_path)
    except OSError as exc:
        raise AdlistFileError("back up", list_path, exc.strerror or str(exc)) from exc
    logger.info("Backed up %s to %s", list_path, backup_path)
    return backup_path


def restore_latest_backup(list_path=ADLISTS_PATH, backup_dir=BACKUP_DIR):
    backups = sorted(backup_dir.glob("adlists_*.bak"), reverse=True)
    if backups:
        try:
            shutil.copy(backups[0], list_path)
        except OSError as exc:
            raise AdlistFileError("restore", list_path, exc.strerror or str(exc)) from exc
        logger.info("Restored %s from %s", list_path, backups[0])
        return backups[0]
    return None
