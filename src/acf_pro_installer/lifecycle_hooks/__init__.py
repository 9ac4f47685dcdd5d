"""
Lifecycle hooks.

This package handles:
1. Pinning the version in the dist url of the licensed package
2. Swapping the fetcher of its downloads for one that sends the license key
"""

from .plugin import AcfProInstallerPlugin, HookState
from .rewrite_url_remote_fetcher import RewriteUrlRemoteFetcher

__all__ = ["AcfProInstallerPlugin", "HookState", "RewriteUrlRemoteFetcher"]
