# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON surface exporter.

Writes a boundary mesh as flat position/normal/index arrays, the layout a
WebGL buffer geometry consumes directly.
"""
import json
import logging

from heliosim.ports.export import SurfaceExporter
from heliosim.domain.surfaces import SurfaceMesh

logger = logging.getLogger(__name__)

_DECIMALS = 6


class JsonSurfaceExporter(SurfaceExporter):
    """Exports a SurfaceMesh to JSON."""

    def __init__(self, indent: int | None = None) -> None:
        self._indent = indent

    def export(self, mesh: SurfaceMesh, path: str) -> int:
        if mesh.is_degenerate:
            logger.info("Exporting degenerate %s surface (feature absent)", mesh.kind.value)

        doc = {
            'kind': mesh.kind.value,
            'jd': mesh.jd,
            'resolution': mesh.resolution,
            'degenerate': mesh.is_degenerate,
            'vertexCount': mesh.vertex_count,
            'position': [round(float(c), _DECIMALS) for c in mesh.vertices.ravel()],
            'normal': [round(float(c), _DECIMALS) for c in mesh.normals.ravel()],
            'index': [int(i) for i in mesh.triangles.ravel()],
        }
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(doc, f, indent=self._indent)
        return mesh.vertex_count
