# gamebrowser/launch.py
from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .models import Catalog, Entry, LaunchError, EmptyCommand, SpawnError
from .utils import is_windows

logger = logging.getLogger(__name__)

# ──────────────────────────────────────────────────────────────────────────────
# Small helpers
# ──────────────────────────────────────────────────────────────────────────────

def split_command(command: str) -> List[str]:
    """Whitespace split. No quoting: arguments containing spaces can't be expressed."""
    return (command or "").split()

def _detach_kwargs() -> Dict[str, Any]:
    if is_windows():
        flags = subprocess.CREATE_NEW_PROCESS_GROUP | subprocess.CREATE_NO_WINDOW
        return {"creationflags": flags}
    return {"start_new_session": True}

# picked once per platform
DETACH_KWARGS = _detach_kwargs()

def spawn_detached(argv: List[str]) -> int:
    """
    Start argv with no inherited stdio and in its own process group/session.
    Returns the pid as soon as the OS has created the process; never waits on it.
    """
    try:
        p = subprocess.Popen(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            close_fds=True,
            **DETACH_KWARGS,
        )
    except (OSError, ValueError) as e:
        # ValueError: argv the OS can never accept, e.g. an embedded NUL byte
        raise SpawnError(f"Failed to start {argv[0]}: {e}", os_error=e) from e
    return p.pid

# ──────────────────────────────────────────────────────────────────────────────
# Public API
# ──────────────────────────────────────────────────────────────────────────────

@dataclass
class LaunchResult:
    ok: bool
    message: str
    entry: Optional[Entry] = None
    pid: Optional[int] = None
    error: Optional[LaunchError] = None

def launch(catalog: Catalog, launch_id: int) -> LaunchResult:
    """
    Resolve launch_id to its entry and start the entry's command detached.
    Launch errors (NotFound, EmptyCommand, SpawnError) come back as a failed
    result instead of being raised.
    """
    entry = None
    try:
        entry = catalog.get(launch_id)
        argv = split_command(entry.command)
        if not argv:
            raise EmptyCommand(f"No command configured for {entry.title!r}.")
        pid = spawn_detached(argv)
    except LaunchError as e:
        logger.warning("Launch %s failed: %s", launch_id, e)
        return LaunchResult(ok=False, message=str(e), entry=entry, error=e)

    logger.info("Started detached process for %r with PID %s", entry.title, pid)
    return LaunchResult(ok=True, message="Game launched successfully", entry=entry, pid=pid)
