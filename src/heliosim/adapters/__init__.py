# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for surface and trajectory export.

External dependencies (json, csv, file I/O) are confined to this layer.
"""
from heliosim.adapters.csv_exporter import CsvTrajectoryExporter
from heliosim.adapters.json_exporter import JsonSurfaceExporter
from heliosim.adapters.obj_exporter import ObjSurfaceExporter

__all__ = ["CsvTrajectoryExporter", "JsonSurfaceExporter", "ObjSurfaceExporter"]
