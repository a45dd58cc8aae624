"""
Keypress decoding for raw terminal input.
"""
from typing import List, NamedTuple, Tuple


class Key(NamedTuple):
    """A decoded keypress."""
    name: str
    ctrl: bool = False


# Final byte of CSI / SS3 arrow sequences
ARROWS = {'A': 'up', 'B': 'down', 'C': 'right', 'D': 'left'}

UNKNOWN = Key('unknown')


def decode_keys(buf: str, final: bool = True) -> Tuple[List[Key], str]:
    """
    Parse text read from the terminal into keys.

    Args:
        buf: Text read from stdin in non-canonical mode
        final: No more input is coming, so an unfinished escape sequence is
            decoded as it stands (a trailing lone ESC is the escape key)

    Returns:
        Keys in the order they were typed, and the unfinished tail that
        should be joined to the next read (always empty when final)
    """
    out = []
    i = 0
    n = len(buf)
    while i < n:
        c = buf[i]
        if c == "\x1b":
            if i + 1 >= n:
                # Need at least 2 more bytes to decide
                if not final:
                    break
                out.append(Key('escape')); i += 1; continue
            n1 = buf[i + 1]
            if n1 == "\x1b":
                out.append(Key('escape')); i += 1; continue
            if n1 == "O":
                # SS3 arrows: ESC O A/B/C/D
                if i + 2 >= n and not final:
                    break
                if i + 2 < n and buf[i + 2] in ARROWS:
                    out.append(Key(ARROWS[buf[i + 2]])); i += 3; continue
                out.append(UNKNOWN); i += min(3, n - i); continue
            if n1 == "[":
                # CSI: parameters until a final byte in 0x40..0x7e
                j = i + 2
                while j < n and not ("\x40" <= buf[j] <= "\x7e"):
                    j += 1
                if j >= n and not final:
                    break
                if j < n and j == i + 2 and buf[j] in ARROWS:
                    out.append(Key(ARROWS[buf[j]]))
                else:
                    out.append(UNKNOWN)
                i = j + 1
                continue
            # Alt+key
            out.append(UNKNOWN); i += 2; continue
        if c in ("\r", "\n"):
            out.append(Key('enter')); i += 1; continue
        if c == " ":
            out.append(Key('space')); i += 1; continue
        if c == "\t":
            out.append(Key('tab')); i += 1; continue
        if "\x01" <= c <= "\x1a":
            out.append(Key(chr(ord(c) + 96), ctrl=True)); i += 1; continue
        if c.isprintable():
            out.append(Key(c.lower()))
        else:
            out.append(UNKNOWN)
        i += 1
    return out, buf[i:]
