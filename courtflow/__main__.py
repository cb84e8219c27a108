"""Entry point for the courtflow package."""

import argparse
import asyncio

from rich.console import Console
from rich.table import Table

from courtflow.animation.export import export_sequence
from courtflow.config import configure_logging, get_config
from courtflow.core.models import AnimationSequence, PlayDiagram
from courtflow.playback import format_time
from courtflow.services import AnimationService
from courtflow.storage import InMemoryAnimationRepository, InMemoryPlayRepository

DEMO_PLAY_ID = "demo-give-and-go"

# Five-out alignment: the point guard hits the wing and cuts to the rim
DEMO_DIAGRAM = {
    "players": [
        {"id": "p1", "label": "1", "x": 400, "y": 350},
        {"id": "p2", "label": "2", "x": 600, "y": 300},
        {"id": "p3", "label": "3", "x": 200, "y": 300},
        {"id": "p4", "label": "4", "x": 650, "y": 150},
        {"id": "p5", "label": "5", "x": 150, "y": 150},
    ],
    "actions": [
        {"id": "a1", "type": "pass", "from": {"playerId": "p1"}, "to": {"playerId": "p2"}},
        {"id": "a2", "type": "cut", "from": {"playerId": "p1"}, "to": {"x": 400, "y": 150}},
        {"id": "a3", "type": "pass", "from": {"playerId": "p2"}, "to": {"playerId": "p1"}},
        {"id": "a4", "type": "shot", "from": {"playerId": "p1"}, "to": {"x": 400, "y": 80}},
    ],
}


async def build_demo_sequence(duration: float, fps: int) -> AnimationSequence:
    """Generate the demo play's sequence with in-memory storage."""
    plays = InMemoryPlayRepository({DEMO_PLAY_ID: PlayDiagram.from_dict(DEMO_DIAGRAM)})
    service = AnimationService(InMemoryAnimationRepository(), plays)
    return await service.create(
        DEMO_PLAY_ID, "Give and Go", duration, settings={"fps": fps},
    )


def print_sequence(sequence: AnimationSequence, every_ms: float = 1000.0) -> None:
    """Print keyframes and a sampled subset of frames."""
    console = Console()
    console.print(
        f"[bold]{sequence.name}[/bold]  {format_time(sequence.duration)}  "
        f"{len(sequence.frames)} frames @ {sequence.settings.fps} fps, "
        f"{len(sequence.movement_paths)} movement paths"
    )

    keyframes = Table(title="Keyframes")
    keyframes.add_column("Time", justify="right")
    keyframes.add_column("Name")
    keyframes.add_column("Type")
    keyframes.add_column("Description")
    for keyframe in sequence.keyframes:
        keyframes.add_row(
            f"{keyframe.timestamp:.0f}ms", keyframe.name, keyframe.type.value, keyframe.description or "",
        )
    console.print(keyframes)

    frames = Table(title="Frames")
    frames.add_column("Time", justify="right")
    for player in sequence.frames[0].players if sequence.frames else ():
        frames.add_column(player.label or player.id)
    frames.add_column("Actions")

    next_sample = 0.0
    for frame in sequence.frames:
        if frame.timestamp < next_sample:
            continue
        next_sample += every_ms
        cells = [f"({p.position.x:.0f}, {p.position.y:.0f})" for p in frame.players]
        actions = ", ".join(f"{a.type.value} {a.progress:.0%}" for a in frame.actions)
        frames.add_row(f"{frame.timestamp:.0f}ms", *cells, actions or "-")
    console.print(frames)


def main() -> None:
    """Main entry point for courtflow."""
    config = get_config()
    parser = argparse.ArgumentParser(
        description="courtflow - play diagram animation timelines",
        prog="courtflow",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Generate and print the built-in five-player play",
    )
    parser.add_argument(
        "--export",
        type=str,
        metavar="PATH",
        help="Write the demo sequence as JSON to PATH",
    )
    parser.add_argument(
        "--duration",
        type=float,
        default=config.default_duration_ms,
        help=f"Demo duration in ms (default: {config.default_duration_ms})",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=config.default_fps,
        help=f"Demo frame rate (default: {config.default_fps})",
    )
    parser.add_argument(
        "--serve",
        action="store_true",
        help="Run the API server",
    )
    parser.add_argument("--host", type=str, default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (default: COURTFLOW_LOG_LEVEL or INFO)",
    )

    args = parser.parse_args()
    configure_logging(args.log_level)

    if args.serve:
        from courtflow.api import run_api

        run_api(host=args.host, port=args.port)
        return

    if not (args.demo or args.export):
        parser.print_help()
        return

    sequence = asyncio.run(build_demo_sequence(args.duration, args.fps))
    if args.demo:
        print_sequence(sequence)
    if args.export:
        export_sequence(sequence).save(args.export)
        Console().print(f"Exported {sequence.name} to {args.export}")


if __name__ == "__main__":
    main()
