"""
Interfaces of the package manager the plugin hooks into.

This package provides:
1. The lifecycle event kinds and event objects
2. The remote fetcher used to download package archives
3. The dispatcher that routes events to plugin handlers
"""

from .remote_fetcher import RemoteFetcher
from .events import EventKind, PackageEvent, PreFileDownloadEvent
from .event_dispatcher import EventDispatcher

__all__ = [
    "EventDispatcher",
    "EventKind",
    "PackageEvent",
    "PreFileDownloadEvent",
    "RemoteFetcher",
]
