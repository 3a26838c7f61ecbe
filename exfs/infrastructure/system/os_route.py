"""Dispatches to a per-platform handler keyed by the running platform.

Also provides the per-user configuration directory lookup, which is the
main consumer of the dispatch table.
"""

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from exfs.domain.exceptions import UnsupportedPlatformError

logger = logging.getLogger(__name__)

LINUX = "linux"
MAC = "mac"
WINDOWS = "windows"


@dataclass(frozen=True)
class OperatingSystemRoute:
    """One optional handler per supported platform."""

    linux: Optional[Callable[[], Any]] = None
    mac: Optional[Callable[[], Any]] = None
    windows: Optional[Callable[[], Any]] = None

    def handlers(self) -> Dict[str, Optional[Callable[[], Any]]]:
        return {LINUX: self.linux, MAC: self.mac, WINDOWS: self.windows}


def platform_key(platform_name: str) -> Optional[str]:
    """Maps a ``sys.platform`` value to a route key, or None if unsupported."""
    if platform_name.startswith("linux"):
        return LINUX
    if platform_name == "darwin":
        return MAC
    if platform_name in ("win32", "cygwin"):
        return WINDOWS
    return None


def run_on(route: OperatingSystemRoute, platform_name: Optional[str] = None) -> Any:
    """Calls the route's handler for the running (or given) platform.

    Raises:
        UnsupportedPlatformError: If the platform is unknown or the route has no handler for it.
    """
    platform_name = platform_name or sys.platform
    key = platform_key(platform_name)
    handler = route.handlers().get(key) if key else None
    if handler is None:
        raise UnsupportedPlatformError(platform_name)
    logger.debug(f"Dispatching to {key} handler for platform '{platform_name}'")
    return handler()


def user_config_dir(platform_name: Optional[str] = None) -> Path:
    """Returns the base directory for per-user configuration files."""
    return run_on(
        OperatingSystemRoute(
            linux=lambda: Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"),
            mac=lambda: Path.home() / "Library" / "Application Support",
            windows=lambda: Path(os.environ.get("APPDATA") or Path.home() / "AppData" / "Roaming"),
        ),
        platform_name,
    )
