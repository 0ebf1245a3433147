# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV Mars time exporter.

Writes one row per MarsInstant with calendar, clock and geometry columns.
External dependencies (csv, file I/O) are confined to this adapter.
"""
import csv
import logging
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

from marsdate.ports.export import MarsTimeExporter
from marsdate.domain.mars_instant import MarsInstant
from marsdate.domain.sites import SurfaceSite
from marsdate.domain.time_systems import LEAP_SECOND_ERA_START_MILLIS
from marsdate.adapters.formatting import MarsDateFormatter


class CsvMarsTimeExporter(MarsTimeExporter):
    """Exports Mars time records to CSV."""

    def __init__(self, formatter: Optional[MarsDateFormatter] = None) -> None:
        self._formatter = formatter or MarsDateFormatter()

    def export(
        self,
        instants: Iterable[MarsInstant],
        path: str,
        site: Optional[SurfaceSite] = None,
    ) -> int:
        count = 0
        _warned_pre_1972 = False
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer: Optional[csv.DictWriter] = None
            for instant in instants:
                if (instant.earth_epoch_millis < LEAP_SECOND_ERA_START_MILLIS
                        and not _warned_pre_1972):
                    logger.warning(
                        "Instants before 1972-01-01 use an approximate UTC-TT offset"
                    )
                    _warned_pre_1972 = True
                row = self._formatter.record(instant, site)
                if writer is None:
                    writer = csv.DictWriter(f, fieldnames=list(row))
                    writer.writeheader()
                writer.writerow(row)
                count += 1
        return count
