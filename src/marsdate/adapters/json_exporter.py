# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON Mars time exporter.

Writes a document with the reference data version, the optional site and
one record per MarsInstant.
"""
import json
import logging
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

from marsdate.ports.export import MarsTimeExporter
from marsdate.domain.mars_instant import MarsInstant
from marsdate.domain.sites import SurfaceSite
from marsdate.domain.time_systems import LEAP_SECOND_ERA_START_MILLIS
from marsdate.adapters.formatting import MarsDateFormatter


class JsonMarsTimeExporter(MarsTimeExporter):
    """Exports Mars time records to a JSON document."""

    def __init__(self, formatter: Optional[MarsDateFormatter] = None) -> None:
        self._formatter = formatter or MarsDateFormatter()

    def export(
        self,
        instants: Iterable[MarsInstant],
        path: str,
        site: Optional[SurfaceSite] = None,
    ) -> int:
        records = []
        version = None
        for instant in instants:
            records.append(self._formatter.record(instant, site))
            version = version or instant.reference.version
        if any(r["earth_epoch_millis"] < LEAP_SECOND_ERA_START_MILLIS for r in records):
            logger.warning(
                "Instants before 1972-01-01 use an approximate UTC-TT offset"
            )

        document = {
            "reference_data_version": version,
            "site": None if site is None else {
                "name": site.name,
                "latitude_deg": site.latitude_deg,
                "longitude_west_deg": site.longitude_west_deg,
                "landing_utc": (site.landing_utc.isoformat()
                                if site.landing_utc else None),
            },
            "records": records,
        }
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(document, f, indent=2, ensure_ascii=False)
        return len(records)
