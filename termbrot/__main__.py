import argparse
import logging
import sys

from .log import setup_logging
from .terminal import TerminalSession
from .viewer import TerminalViewer
from .viewport import PRESETS

logger = logging.getLogger(__name__)


CONTROLS = """\
Controls:
  Arrow keys      Pan around the complex plane
  + / =           Zoom in (2x)
  -               Zoom out (2x)
  ]               Increase iterations (+50)
  [               Decrease iterations (-50)
  c               Toggle color / ASCII mode
  1-5             Jump to preset location
  r               Reset to default view
  q / Ctrl-C      Quit
"""


def presets_help() -> str:
    lines = ["Presets:"]
    for index, preset in enumerate(PRESETS, start=1):
        lines.append(f"  {index}  {preset.name}")
    return "\n".join(lines) + "\n"


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="termbrot",
        description="Explore the Mandelbrot set in the terminal.",
        epilog=CONTROLS + "\n" + presets_help(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )


def main(argv=None) -> int:
    parser = build_parser()
    # Only -h/--help is recognized; anything else is ignored.
    parser.parse_known_args(argv)

    setup_logging()
    logger.info("--- termbrot started ---")

    try:
        with TerminalSession() as session:
            TerminalViewer(session).run()
    except Exception:
        logger.exception("Viewer crashed")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
