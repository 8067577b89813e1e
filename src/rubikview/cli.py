"""
Command-line interface for rubikview.

Opens the interactive window, or drives the same session headlessly from a
sequence of key presses, and manages configuration files.
"""

import argparse
import json
import sys
from typing import List, Optional

import yaml

from rubikview.core.config import Config, create_default_config, load_config, validate_config
from rubikview.puzzle.facelets import FACE_ORDER, format_net
from rubikview.session import MOVE_VECTORS, PuzzleSession, SimulatedClock, split_key_sequence
from rubikview.utils.display import LiveLogger, StatusDisplay


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser."""
    parser = argparse.ArgumentParser(
        description="rubikview: interactive 3x3x3 cube puzzle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Open the window
  rubikview play --config configs/default.yaml

  # Apply key presses headlessly (uppercase = modifier held)
  rubikview apply "r u R U" --snapshot cube.png

  # Create default configuration
  rubikview create-config --output config.yaml

  # Check a configuration file
  rubikview validate-config config.yaml --strict
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    play_parser = subparsers.add_parser("play", help="Open the interactive window")
    play_parser.add_argument("--config", "-c", help="Path to configuration file")
    play_parser.add_argument("--quiet", "-q", action="store_true", help="Only print warnings and errors")

    apply_parser = subparsers.add_parser("apply", help="Apply a key sequence without a window")
    apply_parser.add_argument("keys", help="Keys to press, e.g. 'r u R U' or 'ruRU'")
    apply_parser.add_argument("--config", "-c", help="Path to configuration file")
    apply_parser.add_argument("--snapshot", help="Write a PNG of the final state")
    apply_parser.add_argument("--format", choices=["text", "json"], default="text", help="Output format")
    apply_parser.add_argument("--verbose", "-v", action="store_true", help="Log every turn")

    config_parser = subparsers.add_parser("create-config", help="Create default configuration file")
    config_parser.add_argument("--output", "-o", default="config.yaml", help="Output configuration file")

    validate_parser = subparsers.add_parser("validate-config", help="Validate configuration file")
    validate_parser.add_argument("config", help="Configuration file to validate")
    validate_parser.add_argument("--strict", action="store_true", help="Treat warnings as errors")

    bindings_parser = subparsers.add_parser("show-bindings", help="Show the key bindings")
    bindings_parser.add_argument("--config", "-c", help="Path to configuration file")

    return parser


def _load(args, logger: LiveLogger) -> Optional[Config]:
    try:
        return load_config(getattr(args, "config", None))
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        logger.log_error(f"Could not load configuration: {e}")
        return None


def play_command(args) -> int:
    """Execute play command."""
    logger = LiveLogger(verbose=not args.quiet)
    config = _load(args, logger)
    if config is None:
        return 1
    logger.verbose = config.runner.verbose and not args.quiet

    from rubikview.view.app import InteractiveCube3D

    InteractiveCube3D(config, logger=logger).run()
    return 0


def apply_command(args) -> int:
    """Execute apply command."""
    logger = LiveLogger(verbose=args.verbose)
    config = _load(args, logger)
    if config is None:
        return 1

    clock = SimulatedClock()
    session = PuzzleSession(config, clock=clock, logger=logger)
    keys = split_key_sequence(args.keys, session.move_keys)
    applied = session.play_keys(keys, clock)
    cube = session.cube

    if args.snapshot:
        from rubikview.view.visualizer_3d import render_image
        render_image(cube, session.camera, config.view).save(args.snapshot)

    if args.format == "json":
        print(json.dumps({
            "moves": applied,
            "solved": cube.is_solved(),
            "signature": dict(zip(FACE_ORDER, (f"0x{v:08x}" for v in cube.signature()))),
            "faces": cube.face_grids(),
        }, indent=2))
    else:
        StatusDisplay.print_section(f"After {len(applied)} turn(s): {' '.join(applied) or '-'}")
        print(format_net(cube.face_grids()))
        print()
        for face, value in zip(FACE_ORDER, cube.signature()):
            print(f"  {face}: 0x{value:08x}")
        if cube.is_solved():
            print("\n  SOLVED")
        if args.snapshot:
            StatusDisplay.print_status(f"Snapshot saved to {args.snapshot}", "success")
    return 0


def create_config_command(args) -> int:
    """Execute create-config command."""
    create_default_config(args.output)
    StatusDisplay.print_status(f"Default configuration written to {args.output}", "success")
    return 0


def validate_config_command(args) -> int:
    """Execute validate-config command."""
    logger = LiveLogger()
    config = _load(args, logger)
    if config is None:
        return 1

    issues = validate_config(config)
    if not issues:
        StatusDisplay.print_status(f"{args.config} is valid", "success")
        return 0

    StatusDisplay.print_section("Issues")
    for issue in issues:
        print(f"  {issue}")

    errors = [i for i in issues if i.startswith("ERROR")]
    if errors or args.strict:
        return 1
    return 0


def show_bindings_command(args) -> int:
    """Execute show-bindings command."""
    logger = LiveLogger()
    config = _load(args, logger)
    if config is None:
        return 1

    rows: List[List[str]] = []
    for key, name in config.controls.move_keys().items():
        rows.append([key, name, str(MOVE_VECTORS[name])])
    rows.append([config.controls.invert_modifier, "reverse turn (hold)", "-"])
    rows.append([config.controls.reset_view, "reset camera", "-"])

    StatusDisplay.print_section("Key bindings")
    StatusDisplay.print_table(rows, headers=["key", "action", "axis vector"])
    return 0


COMMANDS = {
    "play": play_command,
    "apply": apply_command,
    "create-config": create_config_command,
    "validate-config": validate_config_command,
    "show-bindings": show_bindings_command,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        return COMMANDS[args.command](args)
    except KeyboardInterrupt:
        StatusDisplay.print_status("Interrupted", "warning")
        return 130


if __name__ == "__main__":
    sys.exit(main())
