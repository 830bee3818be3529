"""
Local support modules for the PayBridge UI.

Modules:
    logs: Logging utilities
    objects: Stable hashing and JSON serialization
    paths: Path utilities
    caches: Disk-based caching with TTL support
"""

from paybridge_ui.lib import caches, logs, objects, paths

__all__ = ["caches", "logs", "objects", "paths"]
