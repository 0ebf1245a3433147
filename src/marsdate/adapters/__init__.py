# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for presentation and export.

External dependencies (json, csv, file I/O) are confined to this layer.
"""
from marsdate.adapters.formatting import MarsDateFormatter, format_clock
from marsdate.adapters.csv_exporter import CsvMarsTimeExporter
from marsdate.adapters.json_exporter import JsonMarsTimeExporter

__all__ = [
    "MarsDateFormatter",
    "format_clock",
    "CsvMarsTimeExporter",
    "JsonMarsTimeExporter",
]
