FIRST_PRINTABLE = 32
LAST_PRINTABLE = 126

ASCII_PRINTABLE = "".join(chr(i) for i in range(FIRST_PRINTABLE, LAST_PRINTABLE + 1))

DIGITS = "0123456789"

# Sparse to dense ramp, handy as a starting set for library callers
RAMP = " .:-=+*#%@"


def is_printable(char: str) -> bool:
    return len(char) == 1 and FIRST_PRINTABLE <= ord(char) <= LAST_PRINTABLE


def char_range(start: str, end: str) -> str:
    """Inclusive range of characters between two endpoints, in either direction."""
    lo, hi = sorted((ord(start), ord(end)))
    return "".join(chr(i) for i in range(lo, hi + 1))
