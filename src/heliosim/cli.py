# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for the heliosphere model.

Usage:
    # Snapshot of planets, Voyagers and boundaries at a date
    heliosim --date 2012-08-25

    # Export boundary meshes (format from suffix: .json or .obj)
    heliosim --date 2012-08-25 --export-surface heliopause hp.json
    heliosim --export-surface terminationShock ts.obj --resolution 64 --world-frame

    # Export a Voyager track to CSV
    heliosim --export-trajectory "Voyager 1" v1.csv

    # Compare the boundary model with the Voyager crossings
    heliosim --validate
"""
import argparse
import logging
import math
import sys
from datetime import datetime, timezone

from heliosim.adapters.csv_exporter import CsvTrajectoryExporter
from heliosim.adapters.json_exporter import JsonSurfaceExporter
from heliosim.adapters.obj_exporter import ObjSurfaceExporter
from heliosim.domain.coordinates import (
    APEX_DIR,
    Vec3,
    basis_from_apex,
    equatorial_to_scene,
    radec_to_vec3,
)
from heliosim.domain.crossings import validate_voyager_crossings
from heliosim.domain.ephemeris import planetary_positions
from heliosim.domain.plasma import (
    bow_shock_present,
    heliopause_distance,
    ism_mach_number,
    solar_wind_conditions,
    termination_shock_distance,
)
from heliosim.domain.solar_cycle import solar_cycle_state
from heliosim.domain.spacecraft import (
    SPACECRAFT_NAMES,
    get_trajectory,
    spacecraft_state,
)
from heliosim.domain.surfaces import generate_parametric_surface
from heliosim.domain.time_systems import JulianDate

_SURFACE_EXPORTERS = {
    '.json': JsonSurfaceExporter,
    '.obj': ObjSurfaceExporter,
}


def _parse_date(value: str) -> datetime:
    try:
        dt = datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid date '{value}' (expected ISO format, e.g. 2012-08-25)"
        ) from None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def _perpendicular(nose: Vec3) -> Vec3:
    return basis_from_apex(nose).y_axis


def print_snapshot(epoch: datetime, nose: Vec3 = APEX_DIR) -> None:
    """Print body positions, spacecraft states and boundary distances."""
    jd = JulianDate.from_datetime(epoch)
    cycle = solar_cycle_state(jd)
    print(f"Epoch {epoch.date().isoformat()}  (JD {jd.jd:.2f})")
    print(f"Solar cycle {cycle.cycle_number}: phase {cycle.phase:.2f}, "
          f"activity {cycle.activity_level:.2f}")

    print("\nBodies (AU):")
    for name, (x, y, z) in planetary_positions(jd).items():
        r = math.sqrt(x * x + y * y + z * z)
        print(f"  {name:<8} r={r:8.3f}  ({x:9.3f}, {y:9.3f}, {z:9.3f})")

    print("\nSpacecraft:")
    for name in SPACECRAFT_NAMES:
        trajectory = get_trajectory(name)
        if jd.jd < trajectory.launch_jd:
            print(f"  {name:<10} not yet launched")
            continue
        s = spacecraft_state(trajectory, jd)
        print(f"  {name:<10} {s.distance_au:7.2f} AU  {s.speed_km_s:6.2f} km/s  "
              f"light time {s.light_time_hours:6.2f} h")

    tail = (-nose[0], -nose[1], -nose[2])
    print("\nBoundaries (AU):      nose    flank     tail")
    for label, fn in (("termination shock", termination_shock_distance),
                      ("heliopause", heliopause_distance)):
        print(f"  {label:<17} {fn(nose, nose, jd):8.1f} "
              f"{fn(_perpendicular(nose), nose, jd):8.1f} {fn(tail, nose, jd):8.1f}")
    mach = ism_mach_number()
    if bow_shock_present():
        print(f"  bow shock present (fast Mach {mach:.2f})")
    else:
        print(f"  bow shock absent (fast Mach {mach:.2f})")

    wind = solar_wind_conditions(jd, 1.0)
    print(f"\nSolar wind at 1 AU: {wind.density_cm3:.2f} cm^-3, "
          f"{wind.velocity_km_s:.0f} km/s, {wind.pressure_npa:.2f} nPa")


def print_validation() -> None:
    """Print model boundary distances against the Voyager crossings."""
    print("Voyager boundary crossings (AU):")
    print("  spacecraft  boundary           date        observed  model   error")
    for v in validate_voyager_crossings():
        c = v.crossing
        print(f"  {c.spacecraft:<10}  {c.boundary.value:<17}  {c.date.date().isoformat()}"
              f"  {c.observed_distance_au:7.1f}  {v.model_distance_au:6.1f}"
              f"  {v.relative_error:+6.1%}")


def export_surface(
    kind: str,
    path: str,
    epoch: datetime,
    resolution: int,
    world_frame: bool = False,
    nose: Vec3 = APEX_DIR,
) -> int:
    """Generate a boundary surface and write it with the exporter for path's suffix."""
    suffix = path[path.rfind('.'):].lower() if '.' in path else ''
    exporter_cls = _SURFACE_EXPORTERS.get(suffix)
    if exporter_cls is None:
        raise ValueError(
            f"Unsupported surface format '{suffix or path}'; "
            f"use one of: {', '.join(_SURFACE_EXPORTERS)}"
        )
    mesh = generate_parametric_surface(kind, JulianDate.from_datetime(epoch), resolution)
    if world_frame:
        # nose is equatorial; bodies and trajectories live in the scene frame
        mesh = mesh.to_world(basis_from_apex(equatorial_to_scene(nose)))
    return exporter_cls().export(mesh, path)


def main():
    parser = argparse.ArgumentParser(
        description="Heliosphere model: ephemerides, Voyager tracks and boundary surfaces"
    )
    parser.add_argument(
        '--date', type=_parse_date, default=None,
        help="Epoch as ISO date/time, UTC (default: now)"
    )
    parser.add_argument(
        '--nose-ra-deg', type=float, default=None,
        help="Override nose right ascension in degrees (default: solar apex, 270)"
    )
    parser.add_argument(
        '--nose-dec-deg', type=float, default=None,
        help="Override nose declination in degrees (default: solar apex, +30)"
    )
    parser.add_argument(
        '--validate', action='store_true', default=False,
        help="Compare boundary model against Voyager crossings"
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Enable debug logging"
    )

    export_group = parser.add_argument_group('export')
    export_group.add_argument(
        '--export-surface', nargs=2, action='append', default=[],
        metavar=('KIND', 'PATH'),
        help="Export a boundary mesh (terminationShock, heliopause, bowShock) "
             "to .json or .obj; may be repeated"
    )
    export_group.add_argument(
        '--export-trajectory', nargs=2, action='append', default=[],
        metavar=('NAME', 'PATH'),
        help="Export a spacecraft trajectory to CSV; may be repeated"
    )
    export_group.add_argument(
        '--resolution', type=int, default=48,
        help="Surface grid divisions per axis (default: 48)"
    )
    export_group.add_argument(
        '--world-frame', action='store_true', default=False,
        help="Rotate exported surfaces from the nose frame into the scene frame "
             "shared with planet and trajectory output"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    epoch = args.date or datetime.now(tz=timezone.utc)
    nose = APEX_DIR
    if args.nose_ra_deg is not None or args.nose_dec_deg is not None:
        ra = math.radians(args.nose_ra_deg if args.nose_ra_deg is not None else 270.0)
        dec = math.radians(args.nose_dec_deg if args.nose_dec_deg is not None else 30.0)
        nose = radec_to_vec3(ra, dec)

    try:
        exporting = args.export_surface or args.export_trajectory
        if args.validate:
            print_validation()
        elif not exporting:
            print_snapshot(epoch, nose)

        for kind, path in args.export_surface:
            n = export_surface(kind, path, epoch, args.resolution,
                               world_frame=args.world_frame, nose=nose)
            print(f"Exported {kind} surface ({n} vertices) to {path}")

        for name, path in args.export_trajectory:
            n = CsvTrajectoryExporter().export(get_trajectory(name), path, end=epoch)
            print(f"Exported {n} {name} samples to {path}")
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: cannot write output: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
