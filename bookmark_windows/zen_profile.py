#!/usr/bin/env python3
"""
Zen Browser profile helpers.

Session files are stored in Mozilla's mozlz4 format: an 8-byte magic header
followed by an lz4 block holding JSON.
"""

import json
import logging
import os
import shutil
import subprocess
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import lz4.block

logger = logging.getLogger(__name__)

MOZLZ4_MAGIC = b"mozLz40\0"
BACKUP_MARKER = ".backup_"


# ============== LZ4 File Operations ==============

def read_lz4_json(path: Path) -> dict:
    """Read mozlz4 compressed JSON file."""
    with open(path, "rb") as f:
        data = f.read()
    if data[:8] != MOZLZ4_MAGIC:
        raise ValueError(f"Invalid mozlz4 format: {path}")
    return json.loads(lz4.block.decompress(data[8:]))


def write_lz4_json(path: Path, data: dict):
    """Write mozlz4 compressed JSON file."""
    compressed = lz4.block.compress(json.dumps(data).encode("utf-8"))
    with open(path, "wb") as f:
        f.write(MOZLZ4_MAGIC)
        f.write(compressed)


# ============== Zen Profile ==============

def zen_profiles_root() -> Path:
    """Directory holding Zen profiles on this platform."""
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "zen" / "Profiles"
    if sys.platform == "win32":
        return Path(os.environ.get("APPDATA", "")) / "zen" / "Profiles"
    return Path.home() / ".zen" / "Profiles"


def find_zen_profile(zen_root: Optional[Path] = None) -> Optional[Path]:
    """Find default Zen Browser profile."""
    zen_root = zen_root or zen_profiles_root()
    if not zen_root.exists():
        return None

    profiles = sorted(p for p in zen_root.iterdir() if p.is_dir())
    for profile_dir in profiles:
        if "default" in profile_dir.name.lower():
            return profile_dir
    return profiles[0] if profiles else None


def recovery_path(profile_path: Path) -> Path:
    """Path of the session file Zen restores windows from."""
    return profile_path / "sessionstore-backups" / "recovery.jsonlz4"


def is_zen_running() -> bool:
    """Check if Zen Browser is running."""
    for pattern in ["zen", "Zen Browser", "zen-browser"]:
        try:
            result = subprocess.run(
                ["pgrep", "-if", pattern],
                capture_output=True,
                text=True,
            )
        except FileNotFoundError:
            logger.debug("pgrep not available, assuming Zen is closed")
            return False
        if result.returncode == 0:
            return True
    return False


# ============== Backups ==============

def _session_files(profile_path: Path) -> List[Path]:
    recovery = recovery_path(profile_path)
    return [recovery, recovery.with_suffix(".baklz4")]


def create_backup(profile_path: Path) -> str:
    """
    Copy session files aside. Returns the backup timestamp.

    A "-N" suffix is added when a backup from the same second exists,
    so earlier backups are never overwritten.
    """
    base = datetime.now().strftime("%Y%m%d_%H%M%S")
    existing = get_backup_timestamps(profile_path)
    timestamp = base
    counter = 1
    while timestamp in existing:
        timestamp = f"{base}-{counter}"
        counter += 1

    for src in _session_files(profile_path):
        if src.exists():
            dst = src.with_name(f"{src.name}{BACKUP_MARKER}{timestamp}")
            shutil.copy2(src, dst)
            logger.info(f"Backup: {dst.name}")
    return timestamp


def _backup_order(timestamp: str):
    base, _, counter = timestamp.partition("-")
    return base, int(counter or 0)


def get_backup_timestamps(profile_path: Path) -> List[str]:
    """Unique backup timestamps, newest first."""
    backup_dir = recovery_path(profile_path).parent
    if not backup_dir.exists():
        return []

    timestamps = {
        f.name.split(BACKUP_MARKER, 1)[1]
        for f in backup_dir.glob(f"*{BACKUP_MARKER}*")
    }
    return sorted(timestamps, key=_backup_order, reverse=True)


def restore_from_backup(profile_path: Path, timestamp: Optional[str] = None) -> bool:
    """
    Restore session files from backup.
    If timestamp is None, uses the latest backup.
    Returns True if anything was restored.
    """
    timestamps = get_backup_timestamps(profile_path)
    if not timestamps:
        logger.error("No backups found")
        return False

    if timestamp is None:
        timestamp = timestamps[0]
    elif timestamp not in timestamps:
        logger.error(f"Backup with timestamp '{timestamp}' not found")
        return False

    restored = 0
    for target in _session_files(profile_path):
        backup = target.with_name(f"{target.name}{BACKUP_MARKER}{timestamp}")
        if backup.exists():
            shutil.copy2(backup, target)
            logger.info(f"Restored: {target.name}")
            restored += 1
    return restored > 0


# ============== Import ==============

def write_windows_to_profile(profile_path: Path, host) -> str:
    """
    Append the windows built by a session host to the profile's session.

    Zen must be closed, otherwise it overwrites the file on exit.
    Returns the timestamp of the backup taken before writing.
    """
    recovery = recovery_path(profile_path)
    if not recovery.exists():
        raise FileNotFoundError(f"Session file not found: {recovery}")

    timestamp = create_backup(profile_path)

    data = host.append_to_session(read_lz4_json(recovery))
    write_lz4_json(recovery, data)
    logger.info(f"Updated: {recovery.name}")

    bak = recovery.with_suffix(".baklz4")
    if bak.exists():
        write_lz4_json(bak, data)
        logger.info(f"Updated: {bak.name}")

    return timestamp
