"""Async client for the GitButler cloud API."""

from butler_cloud.backend import sync_to_cloud
from butler_cloud.cloud import CloudClient, HTTPRequestError, RequestMethod

__version__ = "0.1.0"

__all__ = ["CloudClient", "HTTPRequestError", "RequestMethod", "sync_to_cloud", "__version__"]
