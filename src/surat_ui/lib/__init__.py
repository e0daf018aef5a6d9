"""
Local library modules shared by the services and views.

Modules:
    logs: Logging utilities
    objects: Cache keys and JSON serialization
    paths: Path utilities
    clients: httpx client factory for the REST API
    caches: Disk-based caching with TTL support
"""

from surat_ui.lib import caches, clients, logs, objects, paths

__all__ = ["caches", "clients", "logs", "objects", "paths"]
