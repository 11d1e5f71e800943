"""CLI for rgss-serializer."""

import argparse
import sys

from rgss_serializer.domain.constants import DEFAULT_LINE_WIDTH, DEFAULT_TABLE_WIDTH
from rgss_serializer.domain.enums import Direction, ProjectVersion
from rgss_serializer.domain.models import ConversionOptions
from rgss_serializer.errors import ConversionError
from rgss_serializer.log_config import configure_logging
from rgss_serializer.orchestrator import ConversionOrchestrator

VALID_DIRECTIONS = [d.value for d in Direction]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='rgss-serializer',
        description='Convert game project data, scripts and saves between binary and YAML',
        epilog=f"The directions can be one or more of {', '.join(VALID_DIRECTIONS)}",
    )
    parser.add_argument('targets', nargs='+', metavar='direction... directory',
                        help='Conversion directions followed by the project directory')

    version = parser.add_mutually_exclusive_group()
    version.add_argument('-a', '--ace', dest='version', action='store_const', const=ProjectVersion.ACE,
                         help='Directory is a VX Ace project (default)')
    version.add_argument('-v', '--vx', dest='version', action='store_const', const=ProjectVersion.VX,
                         help='Directory is a VX project')
    version.add_argument('-x', '--xp', dest='version', action='store_const', const=ProjectVersion.XP,
                         help='Directory is an XP project')
    parser.set_defaults(version=ProjectVersion.ACE)

    parser.add_argument('-l', '--line-width', type=int, default=DEFAULT_LINE_WIDTH,
                        help=f'Line width for YAML output, -1 for no limit (default: {DEFAULT_LINE_WIDTH})')
    parser.add_argument('-t', '--table-width', type=int, default=DEFAULT_TABLE_WIDTH,
                        help=f'Entries per row for table data, -1 for no limit (default: {DEFAULT_TABLE_WIDTH})')
    parser.add_argument('-f', '--force', action=argparse.BooleanOptionalAction, default=False,
                        help='Force conversion and ignore file times')
    parser.add_argument('--verbose', action='store_true', help='Report every converted or skipped file')
    return parser


def split_targets(parser: argparse.ArgumentParser, targets: list[str]) -> tuple[list[Direction], str]:
    """Separate direction names from the single project directory."""
    directions: list[Direction] = []
    path = None
    for arg in targets:
        if arg in VALID_DIRECTIONS:
            directions.append(Direction(arg))
        elif path is not None:
            parser.error(f"Multiple directories entered. '{path}' and '{arg}'")
        else:
            path = arg

    if not directions:
        parser.error(f"Must enter a valid direction. Possible choices are {', '.join(VALID_DIRECTIONS)}")
    if path is None:
        parser.error("Must enter a project directory")
    return directions, path


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    directions, path = split_targets(parser, args.targets)

    configure_logging(args.verbose)
    options = ConversionOptions(
        force=args.force,
        line_width=args.line_width,
        table_width=args.table_width,
    )

    orchestrator = ConversionOrchestrator()
    for direction in directions:
        print(f"Running {direction.value} on {path}...")
        try:
            result = orchestrator.serialize(args.version, direction, path, options)
        except ConversionError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(f"Done! Converted {len(result.converted)}, skipped {len(result.skipped)}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
