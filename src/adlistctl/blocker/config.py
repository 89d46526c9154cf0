# src/adlistctl/blocker/config.py

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

ADLISTS_PATH = Path(os.getenv("ADLISTS_PATH", "/etc/pihole/adlists.list"))
BACKUP_DIR = Path(os.getenv("ADLISTCTL_BACKUP_DIR", str(Path.home() / ".adlistctl_backups")))

# Rebuilds the gravity database from the current adlists
PIHOLE_BIN = os.getenv("PIHOLE_BIN", "/usr/local/bin/pihole")
GRAVITY_COMMAND = [PIHOLE_BIN, "-g"]

LOG_LEVEL = os.getenv("ADLISTCTL_LOG_LEVEL", "WARNING").upper()

COMMENT_MARK = "#"
DISABLED_PREFIX = "# "
