# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for Mars time export.

Adapters implement this to write a series of MarsInstants in various
formats (CSV, JSON).
"""
from typing import Iterable, Optional, Protocol, runtime_checkable

from marsdate.domain.mars_instant import MarsInstant
from marsdate.domain.sites import SurfaceSite


@runtime_checkable
class MarsTimeExporter(Protocol):
    """Port for exporting Mars time records to file."""

    def export(
        self,
        instants: Iterable[MarsInstant],
        path: str,
        site: Optional[SurfaceSite] = None,
    ) -> int:
        """
        Export one record per instant.

        Args:
            instants: MarsInstants in the order they should be written.
            path: Output file path.
            site: Surface site for local time and Sun direction columns;
                omitted columns when None.

        Returns:
            Number of records exported.
        """
        ...
