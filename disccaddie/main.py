"""
Disc Caddie command line entry point.

Usage:
    disc-caddie recommend --hand R --throw BH --arm 10 --wind-dir 12 \\
        --wind-speed 3 --distance 80 --preset slightly_left
    disc-caddie recommend --link "side=R&bh=1&fh=0&arm=11&wd=3&ws=5&dist=90"
    disc-caddie recommend ... --user alice      # use alice's saved tuning
    disc-caddie flight --speed 9 --glide 5 --turn -1 --fade 2 --release hyzer
    disc-caddie styles
"""

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from disccaddie.errors import DiscCaddieError
from disccaddie.flight_path import calculate_flight_path
from disccaddie.line_detection import LINE_PRESETS, get_preset
from disccaddie.models.disc import stability_category
from disccaddie.models.flight import ReleaseAngle
from disccaddie.models.recommendation import HandSide, LineShape, ThrowType
from disccaddie.models.request import CalculatorRequest, FlightPathRequest
from disccaddie.throw_advisor import generate_recommendations
from disccaddie.throw_styles import THROW_STYLE_CATEGORIES
from disccaddie.url_state import state_from_query
from disccaddie.utils.config import JsonPreferenceStore

logger = logging.getLogger(__name__)

EXIT_INVALID_INPUT = 2


def setup_logging(verbose: bool = False):
    """Configure logging for the application."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _load_coefficients(args):
    if not args.user:
        return None
    store = JsonPreferenceStore(args.prefs_dir)
    return store.load_or_default(args.user)


def _build_request(args) -> CalculatorRequest:
    coefficients = _load_coefficients(args)

    if args.link:
        return state_from_query(args.link).to_request(coefficients)

    shape = args.shape
    curvature = args.curvature if args.curvature is not None else 0.0
    if args.preset:
        preset = get_preset(args.preset)
        shape, curvature = preset.shape, preset.curvature

    fields = {
        "hand": args.hand,
        "throw_types": args.throw or [ThrowType.BACKHAND.value],
        "arm_speed": args.arm,
        "wind_direction": args.wind_dir,
        "wind_speed": args.wind_speed,
        "distance": args.distance,
        "line_shape": shape,
        "curvature": curvature,
    }
    if coefficients is not None:
        fields["coefficients"] = coefficients
    return CalculatorRequest(**fields)


def run_recommend(args) -> int:
    request = _build_request(args)
    recommendations = generate_recommendations(request)

    if args.json:
        print(json.dumps([r.to_dict() for r in recommendations], indent=2,
                         ensure_ascii=False))
        return 0

    for rec in recommendations:
        print(f"\n{'='*60}")
        print(f"  {rec.label}")
        print(f"{'='*60}")
        print(f"  Disc type:     {rec.disc_type.value}")
        print(f"  Stability:     {rec.stability.category.value} "
              f"({rec.stability.score:+.2f})")
        print(f"  Release:       {rec.release.text}")
        print(f"  Disc speed:    {rec.throwing_power.recommended_speed_rating}")
        if rec.throwing_power.warning:
            print(f"  ⚠ {rec.throwing_power.warning}")
        for tip in rec.tips:
            print(f"  • {tip}")
    print(f"{'='*60}")
    return 0


def run_flight(args) -> int:
    request = FlightPathRequest(
        speed=args.speed,
        glide=args.glide,
        turn=args.turn,
        fade=args.fade,
        release_angle=args.release,
        throw_style_id=args.style,
        is_left_handed=args.left,
    )
    curve = calculate_flight_path(**request.model_dump())

    if args.json:
        print(json.dumps(curve.to_dict(), indent=2))
        return 0

    apex = max(curve.points, key=lambda p: p.height)
    print(f"  Style:          {request.throw_style_id} "
          f"({request.release_angle.value})")
    print(f"  Disc stability: {stability_category(request.turn, request.fade).value}")
    print(f"  Distance:       {curve.max_distance:.1f} m")
    print(f"  Peak height:    {apex.height:.1f} m at {apex.distance:.1f} m")
    print(f"  Landing offset: {curve.landing_offset:+.1f} m")
    return 0


def run_styles(args) -> int:
    for category in THROW_STYLE_CATEGORIES:
        print(f"\n{category.name}")
        for style in category.styles:
            print(f"  {style.id:<26} {style.name}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="disc-caddie",
        description="Disc golf throw recommendations and flight paths",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # recommend
    rec = sub.add_parser("recommend", help="Recommend disc type, stability and release")
    rec.add_argument("--hand", choices=[h.value for h in HandSide], default="R")
    rec.add_argument(
        "--throw", action="append", choices=[t.value for t in ThrowType],
        help="Throw type to recommend for; repeat for both (default: BH)",
    )
    rec.add_argument("--arm", type=int, default=10, help="Arm speed 8-14 (default: 10)")
    rec.add_argument("--wind-dir", type=int, default=12,
                     help="Clock position the wind comes from, 1-12 (default: 12)")
    rec.add_argument("--wind-speed", type=float, default=0.0,
                     help="Wind speed in m/s (default: 0)")
    rec.add_argument("--distance", type=float, default=70.0,
                     help="Distance to target in meters (default: 70)")
    line = rec.add_mutually_exclusive_group()
    line.add_argument("--shape", choices=[s.value for s in LineShape],
                      default=LineShape.STRAIGHT.value)
    line.add_argument("--preset", choices=[p.name for p in LINE_PRESETS],
                      help="Use a preset line instead of --shape/--curvature")
    rec.add_argument("--curvature", type=float,
                     help="Line curvature 0-1 (default: 0); not allowed with --preset")
    rec.add_argument("--link", help="Read all inputs from a calculator link query")
    rec.add_argument("--user", help="Use this user's saved tuning coefficients")
    rec.add_argument("--prefs-dir", help="Preference directory (default: ~/.disc-caddie/preferences)")
    rec.add_argument("--json", action="store_true", help="Print JSON")
    rec.set_defaults(func=run_recommend)

    # flight
    flight = sub.add_parser("flight", help="Predict a disc's flight path")
    flight.add_argument("--speed", type=float, required=True)
    flight.add_argument("--glide", type=float, required=True)
    flight.add_argument("--turn", type=float, required=True)
    flight.add_argument("--fade", type=float, required=True)
    flight.add_argument("--release", choices=[r.value for r in ReleaseAngle],
                        default=ReleaseAngle.FLAT.value)
    flight.add_argument("--style", default="backhand_standard",
                        help="Throw style id (see 'styles')")
    flight.add_argument("--left", action="store_true", help="Left-handed thrower")
    flight.add_argument("--json", action="store_true", help="Print all points as JSON")
    flight.set_defaults(func=run_flight)

    # styles
    styles = sub.add_parser("styles", help="List throw styles")
    styles.set_defaults(func=run_styles)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "preset", None) and getattr(args, "curvature", None) is not None:
        parser.error("--curvature cannot be combined with --preset")
    setup_logging(args.verbose)

    try:
        return args.func(args)
    except ValidationError as e:
        print(f"Invalid input:\n{e}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except DiscCaddieError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
