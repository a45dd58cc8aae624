"""
Raw terminal input.
"""
import os
import codecs
import sys
import logging
import termios
from select import select
from typing import List, Optional

from .keys import Key, decode_keys

logger = logging.getLogger(__name__)


class RawConsole:
    """
    Context manager that switches the tty to unbuffered, no-echo input.

    Signals are disabled too, so ctrl+c arrives as a keypress instead of
    raising KeyboardInterrupt. The saved attributes are restored on exit.
    """

    READ_SIZE = 64
    ESC_TIMEOUT = 0.05

    def __init__(self, stream=None):
        self.stream = stream or sys.stdin
        self.fd = self.stream.fileno()
        self._saved = None
        self._pending = ''
        self._decoder = codecs.getincrementaldecoder('utf-8')(errors='replace')

    def __enter__(self) -> 'RawConsole':
        self._saved = termios.tcgetattr(self.fd)
        mode = termios.tcgetattr(self.fd)
        mode[3] &= ~(termios.ICANON | termios.ECHO | termios.ISIG)
        mode[6][termios.VMIN] = 1
        mode[6][termios.VTIME] = 0
        termios.tcsetattr(self.fd, termios.TCSAFLUSH, mode)
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._saved is not None:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self._saved)
            self._saved = None
        return False

    def read_keys(self) -> Optional[List[Key]]:
        """
        Block until input arrives. Returns None at end of input.

        An escape sequence cut off at the end of a read is kept and joined to
        the next read. It is decoded as typed only when nothing more arrives
        within ESC_TIMEOUT.
        """
        data = os.read(self.fd, self.READ_SIZE)
        if not data:
            keys, _ = decode_keys(self._pending + self._decoder.decode(b'', final=True))
            self._pending = ''
            return keys or None
        keys, self._pending = decode_keys(self._pending + self._decoder.decode(data), final=False)
        if self._pending and not self._more_input():
            tail, self._pending = decode_keys(self._pending)
            keys.extend(tail)
        return keys

    def _more_input(self) -> bool:
        readable, _, _ = select([self.fd], [], [], self.ESC_TIMEOUT)
        return bool(readable)


def run_session(controller, console) -> None:
    """Feed keys to the controller until it asks to quit or input ends."""
    logger.info("Session started")
    while True:
        keys = console.read_keys()
        if keys is None:
            logger.info("Input closed")
            break
        if not all(controller.input(key) for key in keys):
            break
    logger.info("Session ended")
