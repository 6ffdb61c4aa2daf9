# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Wavefront OBJ surface exporter.

Generates a plain-text .obj mesh (vertices, normals, triangular faces)
that Blender, MeshLab and most 3D tools import directly.
"""
import logging

from heliosim.ports.export import SurfaceExporter
from heliosim.domain.surfaces import SurfaceMesh

logger = logging.getLogger(__name__)


class ObjSurfaceExporter(SurfaceExporter):
    """Exports a SurfaceMesh as a Wavefront OBJ file."""

    def __init__(self, scale: float = 1.0) -> None:
        self._scale = scale

    def export(self, mesh: SurfaceMesh, path: str) -> int:
        if mesh.is_degenerate:
            logger.info("Exporting degenerate %s surface (feature absent)", mesh.kind.value)

        lines = [
            f"# heliosim {mesh.kind.value} surface",
            f"# JD {mesh.jd:.4f}, resolution {mesh.resolution}, units AU x {self._scale:g}",
            f"o {mesh.kind.value}",
        ]
        for x, y, z in mesh.vertices * self._scale:
            lines.append(f"v {x:.6f} {y:.6f} {z:.6f}")
        for x, y, z in mesh.normals:
            lines.append(f"vn {x:.6f} {y:.6f} {z:.6f}")
        # OBJ indices are 1-based
        for a, b, c in mesh.triangles + 1:
            lines.append(f"f {a}//{a} {b}//{b} {c}//{c}")

        with open(path, 'w', encoding='utf-8') as f:
            f.write('\n'.join(lines))
            f.write('\n')
        return mesh.vertex_count
