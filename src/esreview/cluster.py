"""
esreview Cluster — Connection Bootstrap
=======================================

Builds the Elasticsearch client every operation runs against.
"""

import logging
from typing import Any, Dict, Optional

from elasticsearch import ApiError, Elasticsearch, TransportError

from .config import Settings, load_settings


logger = logging.getLogger(__name__)


class ConnectionFailed(Exception):
    """The client could not be created or the cluster could not be reached."""


def connect(settings: Optional[Settings] = None, verify: Optional[bool] = None) -> Elasticsearch:
    """
    Create an Elasticsearch client for the configured hosts.

    Args:
        settings: Connection settings (default: load_settings())
        verify: Ping the cluster before returning (default: settings.verify)

    Returns:
        Connected Elasticsearch client

    Raises:
        ConnectionFailed: Invalid host configuration or unreachable cluster
    """
    settings = settings or load_settings()
    if verify is None:
        verify = settings.verify

    conn_kwargs: Dict[str, Any] = {
        "hosts": settings.hosts
    }

    try:
        client = Elasticsearch(**conn_kwargs)
    except ValueError as e:
        raise ConnectionFailed(f"invalid hosts {settings.hosts}: {e}") from e

    logger.debug("Created client for %s", settings.hosts)

    if verify:
        try:
            info = client.info()
        except (ApiError, TransportError) as e:
            client.close()
            raise ConnectionFailed(f"cannot reach {settings.hosts}: {e}") from e
        logger.debug("Connected to cluster %s", info["cluster_name"])

    return client
