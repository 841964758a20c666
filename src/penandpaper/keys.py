"""Key names for Paper key bindings.

Values are lowercase Tk keysyms, so a Tk key event maps to a member by
`Key.from_keysym(event.keysym)`. Shifted letters map to the same member as
unshifted ones.
"""

from enum import Enum


class Key(str, Enum):
    SPACE = "space"
    ENTER = "return"
    ESCAPE = "escape"
    TAB = "tab"
    BACKSPACE = "backspace"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    A = "a"
    B = "b"
    C = "c"
    D = "d"
    E = "e"
    F = "f"
    G = "g"
    H = "h"
    I = "i"
    J = "j"
    K = "k"
    L = "l"
    M = "m"
    N = "n"
    O = "o"
    P = "p"
    Q = "q"
    R = "r"
    S = "s"
    T = "t"
    U = "u"
    V = "v"
    W = "w"
    X = "x"
    Y = "y"
    Z = "z"

    DIGIT_0 = "0"
    DIGIT_1 = "1"
    DIGIT_2 = "2"
    DIGIT_3 = "3"
    DIGIT_4 = "4"
    DIGIT_5 = "5"
    DIGIT_6 = "6"
    DIGIT_7 = "7"
    DIGIT_8 = "8"
    DIGIT_9 = "9"

    @classmethod
    def from_keysym(cls, keysym: str) -> "Key | None":
        """Map a raw keysym to a Key, or None for keys without a member."""
        try:
            return cls(keysym.lower())
        except ValueError:
            return None
