# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces (abstract contracts for adapters).
"""
from marsdate.ports.export import MarsTimeExporter

__all__ = [
    "MarsTimeExporter",
]
