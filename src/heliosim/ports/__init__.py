# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for model export.

Adapters implement these to write surfaces and trajectories in different
file formats.
"""
from heliosim.ports.export import SurfaceExporter, TrajectoryExporter

__all__ = ["SurfaceExporter", "TrajectoryExporter"]
