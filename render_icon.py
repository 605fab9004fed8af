#!/usr/bin/env python3
"""
CLI tool for rendering battery tray icons to PNG files
"""

import argparse
import sys
from pathlib import Path

from font_sources import font_source_from_name
from icon_config import TEMPLATE_FILLS
from icon_generator import generate_battery_icon, is_template_mode, RenderError
from logging_config import setup_logging, get_logger

logger = get_logger(__name__)


def write_icon(percentage, output_path, font_source, template_fill):
    """Render one icon and write it to output_path"""
    png_bytes = generate_battery_icon(percentage, font_source=font_source, template_fill=template_fill)
    output_path = Path(output_path)
    output_path.write_bytes(png_bytes)
    return output_path


def render_command(args):
    """Render a single percentage"""
    output = args.output or f"battery_{args.percentage}.png"
    try:
        path = write_icon(args.percentage, output, args.font_source, args.template_fill)
    except (RenderError, OSError) as e:
        logger.error(f"Error rendering icon for {args.percentage}%: {e}")
        sys.exit(1)

    mode = "template" if is_template_mode(args.percentage) else "color"
    print(f"✓ Created {path} ({mode} mode)")


def all_command(args):
    """Render every percentage from 0 to 100"""
    output_dir = Path(args.directory)

    percentage = None
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        for percentage in range(101):
            write_icon(percentage, output_dir / f"battery_{percentage}.png", args.font_source, args.template_fill)
    except (RenderError, OSError) as e:
        logger.error(f"Error writing icons to {output_dir} (at {percentage}%): {e}")
        sys.exit(1)

    print(f"✓ Created 101 icons in {output_dir}")


def percentage_arg(value):
    try:
        percentage = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}")
    if not 0 <= percentage <= 100:
        raise argparse.ArgumentTypeError(f"must be between 0 and 100: {percentage}")
    return percentage


def build_parser():
    parser = argparse.ArgumentParser(
        description='CLI tool for rendering battery tray icons',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  render_icon.py render 75                  Write battery_75.png
  render_icon.py render 5 -o low.png        Write the 5% icon to low.png
  render_icon.py render 100 --fill black    Template icon on a black background
  render_icon.py all -d icons               Write all icons from 0 to 100 into icons/
  render_icon.py --font system all          Use the first installed system font
        """
    )
    parser.add_argument(
        '--font', '-f',
        default='bundled',
        help='Font source: "bundled", "system" or a path to a font file (default: bundled)'
    )
    parser.add_argument(
        '--fill',
        choices=sorted(TEMPLATE_FILLS),
        help='Background of template icons (default: black on macOS, white elsewhere)'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    render_parser = subparsers.add_parser('render', help='Render the icon for one percentage')
    render_parser.add_argument('percentage', type=percentage_arg, help='Battery percentage (0-100)')
    render_parser.add_argument('--output', '-o', help='Output file (default: battery_<percentage>.png)')
    render_parser.set_defaults(func=render_command)

    all_parser = subparsers.add_parser('all', help='Render icons for every percentage')
    all_parser.add_argument(
        '--directory', '-d',
        default='.',
        help='Output directory (default: current directory)'
    )
    all_parser.set_defaults(func=all_command)

    return parser


def main(argv=None):
    """Main entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Show help if no command specified
    if not args.command:
        parser.print_help()
        sys.exit(1)

    setup_logging()

    args.font_source = font_source_from_name(args.font)
    args.template_fill = TEMPLATE_FILLS[args.fill] if args.fill else None

    args.func(args)


if __name__ == "__main__":
    main()
