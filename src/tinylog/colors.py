"""
Channel colors.

A small closed palette backed by colorama's ANSI foreground codes.
Colors only affect the channel label; message text is never styled.
"""

from enum import Enum
from typing import Union

from colorama import Fore, Style


RESET = Style.RESET_ALL


class Color(Enum):
    """Foreground color for a channel label.

    The member value is the ANSI escape sequence that selects the color.
    ``Color.DEFAULT`` resets to the terminal's own foreground color.
    """
    DEFAULT = Fore.RESET
    BLACK = Fore.BLACK
    RED = Fore.RED
    GREEN = Fore.GREEN
    YELLOW = Fore.YELLOW
    BLUE = Fore.BLUE
    MAGENTA = Fore.MAGENTA
    CYAN = Fore.CYAN
    WHITE = Fore.WHITE
    BRIGHT_BLACK = Fore.LIGHTBLACK_EX
    BRIGHT_RED = Fore.LIGHTRED_EX
    BRIGHT_GREEN = Fore.LIGHTGREEN_EX
    BRIGHT_YELLOW = Fore.LIGHTYELLOW_EX
    BRIGHT_BLUE = Fore.LIGHTBLUE_EX
    BRIGHT_MAGENTA = Fore.LIGHTMAGENTA_EX
    BRIGHT_CYAN = Fore.LIGHTCYAN_EX
    BRIGHT_WHITE = Fore.LIGHTWHITE_EX

    @property
    def code(self) -> str:
        """The ANSI escape sequence selecting this color."""
        return self.value

    def paint(self, text: str) -> str:
        """Wrap text in this color's code and a full style reset."""
        return f"{self.value}{text}{RESET}"

    @classmethod
    def parse(cls, value: Union['Color', str]) -> 'Color':
        """Resolve a Color from a member or a name like 'red' / 'bright-black'.

        Raises:
            ValueError: If the name does not match any color.
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().upper().replace('-', '_').replace(' ', '_')
        # 'gray'/'grey' is the usual name for bright black
        if key in ('GRAY', 'GREY'):
            key = 'BRIGHT_BLACK'
        try:
            return cls[key]
        except KeyError:
            names = ', '.join(c.name.lower() for c in cls)
            raise ValueError(f"Unknown color {value!r} (expected one of: {names})") from None
