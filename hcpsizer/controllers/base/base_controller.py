"""Base controller for cluster data sources.

Controllers run blocking kubectl calls in worker threads so discovery can be
awaited from the CLI without blocking the event loop.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class BaseController(ABC):
    """Base class for sources of node capacity data."""

    @abstractmethod
    async def check_connection(self) -> bool:
        """Return True when the source can be queried."""
        ...

    @abstractmethod
    async def fetch_all(self) -> dict[str, Any]:
        """Fetch everything the source provides.

        Returns:
            Mapping of source name to parsed records
        """
        ...
