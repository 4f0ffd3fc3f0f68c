#
# PROJECT: ascii-wireframe
# MODULE: ascii_wireframe/terminal.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import sys
from contextlib import contextmanager

from .canvas import FrameBuffer

HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
CLEAR_SCREEN = "\033[2J"


def write_frame(buffer: FrameBuffer, stream=None, use_ansi: bool = True):
    """Write the whole frame as one text blob, cursor-homed when ANSI is on."""
    stream = stream if stream is not None else sys.stdout
    stream.write(buffer.to_text(home=use_ansi))
    stream.flush()


@contextmanager
def hidden_cursor(stream=None, use_ansi: bool = True):
    """Hide the terminal cursor for the duration; always restore it."""
    stream = stream if stream is not None else sys.stdout
    if not use_ansi:
        yield stream
        return
    stream.write(HIDE_CURSOR + CLEAR_SCREEN)
    stream.flush()
    try:
        yield stream
    finally:
        stream.write(SHOW_CURSOR)
        stream.flush()
