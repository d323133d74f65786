from butler_cloud.backend.ipc import invoke
from butler_cloud.backend.sync import sync_to_cloud

__all__ = ["invoke", "sync_to_cloud"]
