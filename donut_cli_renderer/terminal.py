#
# PROJECT: donut-cli-renderer
# MODULE: donut_cli_renderer/terminal.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import sys

# ANSI escape sequences for terminal control
CLEAR_SCREEN = "\033[2J"
HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
CURSOR_HOME = "\033[H"
CLEAR_LINE = "\033[K"


class TerminalController:
    """
    Context manager that prepares the terminal for animation.

    On enter, clears the screen and hides the cursor. On exit, shows the
    cursor again and leaves the last frame on screen.
    """

    def __init__(self, out=None):
        self.out = out if out is not None else sys.stdout

    def __enter__(self) -> 'TerminalController':
        self.out.write(CLEAR_SCREEN)
        self.out.write(HIDE_CURSOR)
        self.out.flush()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.out.write(SHOW_CURSOR)
        self.out.write("\n")
        self.out.flush()

    def present(self, frame: str, status: str = ""):
        """Write one frame at the top-left corner, followed by a status line."""
        self.out.write(CURSOR_HOME)
        self.out.write(frame)
        self.out.write(status + CLEAR_LINE)
        self.out.flush()
