import argparse
import logging
import sys
from pathlib import Path
import os
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = "hide"

# Ensure repo root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from engine.app.loop import run_game


def parse_screen(value: str) -> tuple[int, int]:
    try:
        w, h = map(int, value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WxH, got {value!r}")
    if w <= 0 or h <= 0:
        raise argparse.ArgumentTypeError(f"screen size must be positive, got {value!r}")
    return w, h


def setup_logging(debug: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )


def main(argv=None):
    parser = argparse.ArgumentParser(description="Left/Right reaction game launcher")
    parser.add_argument("--game", default="left_right", help="Game folder name under games/")
    parser.add_argument("--screen", type=parse_screen, default=(512, 512), help="Screen size WxH, e.g. 512x512")
    parser.add_argument("--fps", type=int, default=60, help="Frame rate cap")
    parser.add_argument("--debug", action="store_true", help="Log every state transition")
    args = parser.parse_args(argv)

    setup_logging(args.debug)

    try:
        run_game(
            game_id=args.game,
            screen_size=args.screen,
            fps=args.fps,
            debug=args.debug,
        )
    except (FileNotFoundError, ValueError, AttributeError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
