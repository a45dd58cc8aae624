"""
Terminal front end for Reversi: key decoding, rendering and the controller.
"""
from .console import RawConsole, run_session
from .controller import ReversiController
from .keys import Key, decode_keys
from .view import ReversiView

__all__ = ['Key', 'RawConsole', 'ReversiController', 'ReversiView', 'decode_keys', 'run_session']
