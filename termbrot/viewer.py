"""Interactive terminal Mandelbrot viewer."""

import logging
import time
from typing import List, Optional

from .dispatch import Dispatcher, Outcome
from .keys import decode
from .render import render
from .viewport import Viewport

logger = logging.getLogger(__name__)


class TerminalViewer:
    """Event loop: read a key, update the viewport, redraw.

    `session` is anything with `size()`, `read_key()` and `draw(buffer)`,
    normally an entered `TerminalSession`.
    """

    def __init__(self, session, viewport: Optional[Viewport] = None):
        self.session = session
        self.viewport = viewport if viewport is not None else Viewport()
        self.dispatcher = Dispatcher(self.viewport)
        self.frame_times: List[float] = []
        self.running = False

        # Set from the session in run()
        self.width = 0
        self.height = 0

    def run(self):
        """Main entry point - draw the first frame and process input until quit."""
        # Read once; resizing mid-session is not tracked.
        self.width, self.height = self.session.size()
        logger.info("Terminal size: %dx%d", self.width, self.height)

        self.running = True
        try:
            self.draw()
            while self.running:
                self._handle_input()
        except KeyboardInterrupt:
            logger.info("Interrupted")
        finally:
            self.running = False
            self._log_stats()

    def _handle_input(self):
        data = self.session.read_key()
        if not data:
            logger.info("End of input")
            self.running = False
            return

        for event in decode(data):
            outcome = self.dispatcher.handle(event)
            if outcome is Outcome.QUIT:
                self.running = False
                return
            if outcome is Outcome.REDRAW:
                self.draw()

    def draw(self):
        start = time.perf_counter()
        buffer = render(self.viewport, self.width, self.height)
        self.frame_times.append((time.perf_counter() - start) * 1000)
        self.session.draw(buffer)

    def _log_stats(self):
        """Log rendering statistics on exit."""
        if self.frame_times:
            avg_ms = sum(self.frame_times) / len(self.frame_times)
            logger.info("Rendered %d frames, average frame time %.1fms",
                        len(self.frame_times), avg_ms)
