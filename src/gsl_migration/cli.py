"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import asyncio
import functools
import http.server
import logging
import sys
from typing import TYPE_CHECKING

from gsl_migration import __version__
from gsl_migration.animation import AnimationSequencer, AnimationState, FrameLoader, Phase
from gsl_migration.config import get_settings
from gsl_migration.datasources.ebird import monthly_partition_paths
from gsl_migration.reference import SPECIES
from gsl_migration.store import CHARTS_DIR, DataStore
from gsl_migration.timekeys import TimeKey

if TYPE_CHECKING:
    from gsl_migration.animation import Frame
    from gsl_migration.config import Settings

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="gsl-migration",
        description="Pelican and grebe migration charts and map replay for the Great Salt Lake",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    # 'build' command - chart payloads and static site
    subparsers.add_parser("build", help="Build chart payloads and the static site")

    # 'replay' command - headless map animation
    replay_parser = subparsers.add_parser("replay", help="Replay the observation map headlessly")
    replay_parser.add_argument(
        "--species",
        choices=sorted(SPECIES),
        default="pelican",
        help="Species to replay (default: pelican)",
    )

    # 'serve' command - serve built site locally
    serve_parser = subparsers.add_parser("serve", help="Serve site locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Data: {settings.data_url or settings.data_dir}")
    print(f"Site: {settings.site_dir}")

    envelope = DataStore(settings.data_dir).read_raw(CHARTS_DIR / "climate.json")
    built = envelope["meta"].get("generated_at") if envelope else None
    print(f"Last build: {built or 'never'}")
    return 0


def cmd_build(_args: argparse.Namespace) -> int:
    """Handle the 'build' command."""
    # Imported here so other commands don't pay for loading Prefect
    from gsl_migration.flows.build import build_all

    print("Building site...")
    result = build_all()
    print(f"Done: {result['output']}")
    return 0


class LoggingControls:
    """Headless stand-in for the map's year/month sliders."""

    def __init__(self) -> None:
        self.enabled = True
        self.position: TimeKey | None = None

    def disable(self) -> None:
        self.enabled = False
        logger.debug("Controls disabled")

    def enable(self) -> None:
        self.enabled = True
        logger.debug("Controls enabled")

    def show(self, key: TimeKey) -> None:
        self.position = key


async def log_frame(frame: Frame) -> None:
    logger.info(
        "%s: %d observations (%s)",
        frame.key.label,
        len(frame.observations),
        ", ".join(f"{name} {len(features)}" for name, features in frame.partitions.items())
        or "no files",
    )


async def run_replay(sequencer: AnimationSequencer) -> AnimationState:
    """Start a run and wait for it to finish or be cancelled."""
    state = sequencer.replay()
    await sequencer.wait()
    if state.phase is Phase.PAUSED:
        # Retrieved here so asyncio never reports it as unhandled.
        error = state.error()
        if error is not None:
            logger.debug("Replay task ended with %r", error)
    return state


def build_sequencer(settings: Settings, species_slug: str) -> AnimationSequencer:
    """Wire a sequencer to the data dir for one species."""
    species = SPECIES[species_slug]
    store = DataStore(settings.data_dir, settings.data_url)
    frames = FrameLoader(
        monthly_partition_paths(species, settings.start_year, settings.end_year),
        store.read_json,
    )
    return AnimationSequencer(
        frames,
        log_frame,
        LoggingControls(),
        start=TimeKey(settings.start_year, 0),
        end_year=settings.end_year,
        step_months=settings.step_months,
        interval=settings.tick_interval,
    )


def cmd_replay(args: argparse.Namespace) -> int:
    """Handle the 'replay' command: run the map animation without a browser."""
    settings = get_settings()
    sequencer = build_sequencer(settings, args.species)
    species = SPECIES[args.species]
    print(f"Replaying {species.common_name}: {sequencer.total_ticks} ticks (Ctrl+C to stop)")

    try:
        state = asyncio.run(run_replay(sequencer))
    except KeyboardInterrupt:
        print("\nReplay cancelled.")
        return 130

    print(f"Replay {state.phase}: {state.ticks} ticks, {state.skipped} skipped")
    error = state.error()
    if error is not None:
        print(f"Replay failed at {sequencer.cursor}: {error}", file=sys.stderr)
    return 0 if state.phase is Phase.COMPLETED else 1


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: serve the built site locally."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port
    site_dir = settings.site_dir

    if not site_dir.exists():
        print("No site directory found. Run 'gsl-migration build' first.", file=sys.stderr)
        return 1

    handler = functools.partial(http.server.SimpleHTTPRequestHandler, directory=str(site_dir))

    with http.server.HTTPServer(("", port), handler) as server:
        print(f"Serving site on http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")

    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug or get_settings().debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "build": cmd_build,
        "replay": cmd_replay,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
