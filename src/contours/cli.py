"""Command line entry point: grid JSON in, GeoJSON FeatureCollection out."""

import argparse
import json
import logging
import sys
import time
from pathlib import Path

from contours.builder import ContourBuilder
from contours.geojson import to_feature_collection
from domain.models import GridSettings
from domain.profiles import load_profile
from shared.constants import EXIT_INPUT_ERROR, LOG_FORMAT

logger = logging.getLogger(__name__)

MODES = ('contours', 'lines', 'isobands')


def setup_logging(*, verbose: bool = False) -> None:
    """Configure console logging; DEBUG with ``verbose``."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='contours',
        description='Isolines, contour polygons and isobands of a scalar grid',
    )
    parser.add_argument('grid', type=Path, help='JSON file {"width", "height", "data"}')
    parser.add_argument('--mode', choices=MODES, default='contours')
    parser.add_argument(
        '--thresholds',
        type=float,
        nargs='+',
        required=True,
        help='Threshold values (isobands: consecutive pairs)',
    )
    parser.add_argument('--profile', type=Path, help='TOML settings profile')
    parser.add_argument(
        '--no-smooth',
        action='store_true',
        help='Keep crossings on cell-edge midpoints',
    )
    parser.add_argument('-o', '--output', type=Path, help='Output GeoJSON (default: stdout)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    return parser


def read_grid(path: Path) -> tuple[int, int, list[float]]:
    """Width, height and row-major samples of a grid JSON file."""
    data = json.loads(path.read_text(encoding='utf-8'))
    try:
        width, height, values = int(data['width']), int(data['height']), data['data']
    except (KeyError, TypeError) as e:
        msg = f'Malformed grid file {path}: {e}'
        raise ValueError(msg) from e
    return width, height, values


def make_settings(
    width: int, height: int, profile: Path | None, *, no_smooth: bool
) -> GridSettings:
    """Settings from the optional profile; dimensions always from the grid."""
    options = load_profile(profile) if profile else {}
    options.update(width=width, height=height)
    if no_smooth:
        options['smooth'] = False
    return GridSettings.model_validate(options)


def run(args: argparse.Namespace) -> dict:
    width, height, values = read_grid(args.grid)
    logger.info('Grid %s: %dx%d', args.grid, width, height)
    settings = make_settings(width, height, args.profile, no_smooth=args.no_smooth)
    builder = ContourBuilder(settings)

    started = time.monotonic()
    if args.mode == 'lines':
        items = builder.lines(values, args.thresholds)
    elif args.mode == 'isobands':
        items = builder.isobands(values, args.thresholds)
    else:
        items = builder.contours(values, args.thresholds)
    logger.info(
        'Built %d %s in %.3f s', len(items), args.mode, time.monotonic() - started
    )
    return to_feature_collection(items)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose)
    try:
        collection = run(args)
    except (ValueError, OSError) as e:
        # ContourError and pydantic ValidationError are ValueErrors
        logger.error('Invalid input: %s', e)
        return EXIT_INPUT_ERROR

    text = json.dumps(collection)
    if args.output:
        args.output.write_text(text, encoding='utf-8')
        logger.info('GeoJSON written to %s', args.output)
    else:
        sys.stdout.write(text + '\n')
    return 0
