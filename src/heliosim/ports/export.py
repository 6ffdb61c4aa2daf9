# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for surface and trajectory export.

Adapters implement these to write boundary meshes and spacecraft tracks
for external tools (3D viewers, spreadsheets, web renderers).
"""
from datetime import datetime
from typing import Protocol, runtime_checkable

from heliosim.domain.spacecraft import SpacecraftTrajectory
from heliosim.domain.surfaces import SurfaceMesh
from heliosim.domain.time_systems import JulianDate


@runtime_checkable
class SurfaceExporter(Protocol):
    """Port for exporting a boundary surface mesh to file."""

    def export(self, mesh: SurfaceMesh, path: str) -> int:
        """
        Write a surface mesh to a file.

        Degenerate meshes (absent boundaries) are written like any other
        so consumers can decide whether to draw them.

        Args:
            mesh: SurfaceMesh from generate_parametric_surface.
            path: Output file path.

        Returns:
            Number of vertices written.
        """
        ...


@runtime_checkable
class TrajectoryExporter(Protocol):
    """Port for exporting a spacecraft trajectory to file."""

    def export(
        self,
        trajectory: SpacecraftTrajectory,
        path: str,
        start: "JulianDate | datetime | float | None" = None,
        end: "JulianDate | datetime | float | None" = None,
    ) -> int:
        """
        Write trajectory samples within [start, end] to a file.

        Args:
            trajectory: Built SpacecraftTrajectory.
            path: Output file path.
            start: First epoch to include; launch when None.
            end: Last epoch to include; final sample when None.

        Returns:
            Number of samples written.
        """
        ...
