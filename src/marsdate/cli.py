# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for Mars time conversion.

Usage:
    # Mars time now at the prime meridian
    marsdate

    # A given instant at a landing site (west longitude)
    marsdate --at 2004-01-04T04:35:00Z --site spirit
    marsdate --at 2021-02-18T20:55:00Z --lon 282.55 --lat 18.44 --unit km

    # Mission sol at an arbitrary location
    marsdate --lon 222.56 --lat -4.59 --landing 2012-08-06T05:17:57Z

    # Timeline export
    marsdate --site curiosity --start 2024-01-01 --end 2024-01-03 \\
        --step-hours 6 --export-csv curiosity.csv --export-json curiosity.json

    # Updated IERS leap second table
    marsdate --tai-utc my_tai_utc.json
"""
import argparse
import dataclasses
import logging
import sys
from datetime import datetime, timedelta, timezone
from typing import Optional

from marsdate.domain.earth_mars import DistanceUnit
from marsdate.domain.mars_instant import MarsInstant, timeline
from marsdate.domain.reference_data import ReferenceData, load_reference_data
from marsdate.domain.sites import LANDING_SITES, SurfaceSite, get_site
from marsdate.adapters.formatting import MarsDateFormatter
from marsdate.adapters.csv_exporter import CsvMarsTimeExporter
from marsdate.adapters.json_exporter import JsonMarsTimeExporter

logger = logging.getLogger(__name__)


def parse_instant(text: str) -> datetime:
    """Parse an ISO 8601 timestamp; a trailing Z and naive values mean UTC."""
    value = text.strip()
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(value)
    except ValueError:
        raise ValueError(f"Invalid ISO 8601 timestamp: {text!r}") from None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def resolve_site(
    site_name: Optional[str] = None,
    longitude_west_deg: Optional[float] = None,
    latitude_deg: Optional[float] = None,
    landing: Optional[datetime] = None,
) -> Optional[SurfaceSite]:
    """Named site, or an ad-hoc one from coordinates; None for neither."""
    if site_name:
        site = get_site(site_name)
    elif longitude_west_deg is not None or latitude_deg is not None:
        site = SurfaceSite(
            name="Custom site",
            latitude_deg=latitude_deg if latitude_deg is not None else 0.0,
            longitude_west_deg=longitude_west_deg if longitude_west_deg is not None else 0.0,
        )
    else:
        return None
    if landing is not None:
        site = dataclasses.replace(site, landing_utc=landing)
    return site


def run(
    at: datetime,
    site: Optional[SurfaceSite] = None,
    unit: DistanceUnit = DistanceUnit.AU,
    reference: Optional[ReferenceData] = None,
) -> dict[str, str]:
    """Compute Mars time for one instant and return the formatted summary."""
    instant = MarsInstant.from_datetime(at, reference)
    return MarsDateFormatter(unit=unit).summary(instant, site)


def run_export(
    start: datetime,
    end: datetime,
    step: timedelta,
    site: Optional[SurfaceSite] = None,
    csv_path: Optional[str] = None,
    json_path: Optional[str] = None,
    unit: DistanceUnit = DistanceUnit.AU,
    reference: Optional[ReferenceData] = None,
) -> int:
    """
    Export a timeline of MarsInstants to CSV and/or JSON.

    Returns:
        Number of instants in the timeline.
    """
    if end < start:
        raise ValueError(f"Timeline end {end.isoformat()} is before start {start.isoformat()}")
    instants = list(timeline(start, end, step, reference))
    formatter = MarsDateFormatter(unit=unit)
    if csv_path:
        CsvMarsTimeExporter(formatter).export(instants, csv_path, site)
    if json_path:
        JsonMarsTimeExporter(formatter).export(instants, json_path, site)
    return len(instants)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Convert Earth time to Mars calendar, clock and geometry",
    )
    parser.add_argument(
        '--at',
        help="Earth instant, ISO 8601 (default: now, UTC)",
    )
    location_group = parser.add_argument_group('location')
    location_group.add_argument(
        '--site', help=f"Named landing site: {', '.join(sorted(LANDING_SITES))}",
    )
    location_group.add_argument(
        '--lon', type=float, help="Longitude in degrees west of the prime meridian",
    )
    location_group.add_argument(
        '--lat', type=float, help="Planetographic latitude in degrees",
    )
    location_group.add_argument(
        '--landing', help="Mission landing instant, ISO 8601, for sol of mission",
    )
    parser.add_argument(
        '--unit', choices=['au', 'km'], default='au',
        help="Distance unit (default: au)",
    )

    reference_group = parser.add_argument_group('reference data')
    reference_group.add_argument(
        '--tai-utc', help="Leap second table JSON (default: bundled IERS table)",
    )
    reference_group.add_argument(
        '--mars24', help="Perturber table JSON (default: bundled Mars24 table)",
    )

    export_group = parser.add_argument_group('timeline export')
    export_group.add_argument('--start', help="Timeline start, ISO 8601")
    export_group.add_argument('--end', help="Timeline end, ISO 8601 (inclusive)")
    export_group.add_argument(
        '--step-hours', type=float, default=1.0,
        help="Timeline step in Earth hours (default: 1)",
    )
    export_group.add_argument('--export-csv', help="Write timeline to CSV")
    export_group.add_argument('--export-json', help="Write timeline to JSON")

    parser.add_argument(
        '-v', '--verbose', action='store_true', default=False,
        help="Enable debug logging",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    exporting = args.export_csv or args.export_json
    if exporting and not (args.start and args.end):
        parser.error("--export-csv/--export-json require --start and --end")

    try:
        reference = load_reference_data(args.tai_utc, args.mars24)
        logger.debug("Using reference data %s", reference.version)
        unit = DistanceUnit.parse(args.unit)
        landing = parse_instant(args.landing) if args.landing else None
        site = resolve_site(args.site, args.lon, args.lat, landing)

        if exporting:
            count = run_export(
                start=parse_instant(args.start),
                end=parse_instant(args.end),
                step=timedelta(hours=args.step_hours),
                site=site,
                csv_path=args.export_csv,
                json_path=args.export_json,
                unit=unit,
                reference=reference,
            )
            if args.export_csv:
                print(f"Exported {count} instants to {args.export_csv}")
            if args.export_json:
                print(f"Exported {count} instants to {args.export_json}")
            return

        at = parse_instant(args.at) if args.at else datetime.now(tz=timezone.utc)
        summary = run(at, site=site, unit=unit, reference=reference)
        width = max(len(label) for label in summary)
        for label, value in summary.items():
            print(f"{label:<{width}}  {value}")

    except FileNotFoundError as e:
        print(f"Error: Reference data file not found: {e.filename}", file=sys.stderr)
        sys.exit(1)
    except KeyError as e:
        print(f"Error: {e.args[0]}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
