# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV trajectory exporter.

Exports spacecraft trajectory samples with derived distance, speed and
light time. External dependencies (csv, file I/O) are confined to this
adapter.
"""
import csv
import logging
from datetime import datetime

from heliosim.ports.export import TrajectoryExporter
from heliosim.domain.spacecraft import SpacecraftTrajectory, spacecraft_state
from heliosim.domain.time_systems import JulianDate, as_julian_date, jd_to_datetime

logger = logging.getLogger(__name__)

_HEADER = [
    'name', 'jd', 'date', 'x_au', 'y_au', 'z_au',
    'distance_au', 'speed_km_s', 'light_time_h',
]


class CsvTrajectoryExporter(TrajectoryExporter):
    """Exports trajectory samples to CSV, one row per sample."""

    def export(
        self,
        trajectory: SpacecraftTrajectory,
        path: str,
        start: "JulianDate | datetime | float | None" = None,
        end: "JulianDate | datetime | float | None" = None,
    ) -> int:
        start_jd = trajectory.launch_jd if start is None else as_julian_date(start).jd
        end_jd = trajectory.end_jd if end is None else as_julian_date(end).jd

        rows = 0
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(_HEADER)

            for jd in trajectory.times_jd:
                if jd < start_jd or jd > end_jd:
                    continue
                state = spacecraft_state(trajectory, jd)
                x, y, z = state.position_au
                writer.writerow([
                    trajectory.name,
                    f'{jd:.4f}',
                    jd_to_datetime(jd).date().isoformat(),
                    f'{x:.6f}',
                    f'{y:.6f}',
                    f'{z:.6f}',
                    f'{state.distance_au:.6f}',
                    f'{state.speed_km_s:.4f}',
                    f'{state.light_time_hours:.4f}',
                ])
                rows += 1

        if rows == 0:
            logger.warning(
                "No %s samples between JD %.1f and JD %.1f",
                trajectory.name, start_jd, end_jd,
            )
        return rows
