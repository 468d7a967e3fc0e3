from __future__ import annotations

import unicodedata
from enum import Enum

from dosname.models import EXTENSION_LEN

# Non-alphanumeric characters permitted in a FAT12/16 filename, taken from the
# MS-DOS 6 Concise User's Guide.
ALLOWED_PUNCTUATION = frozenset("_^$~!#%&-{}@`'()")

# Unicode White_Space property. str.isspace() also accepts the U+001C..U+001F
# separators, which are not spaces.
WHITE_SPACE = (
    "\t\n\v\f\r \x85\xa0\u1680"
    + "".join(chr(cp) for cp in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000"
)

# Latin script letters whose Unicode names do not mention LATIN.
LATIN_ORDINALS = frozenset("ªº")


class CharPolicy(str, Enum):
    KEEP = "keep"
    UNDERSCORE = "underscore"
    SEPARATOR = "separator"
    PLACEHOLDER = "placeholder"


def is_latin(ch: str) -> bool:
    if ch in LATIN_ORDINALS:
        return True
    if not unicodedata.category(ch).startswith("L"):
        return False
    return "LATIN" in unicodedata.name(ch, "")


def is_decimal_digit(ch: str) -> bool:
    return unicodedata.category(ch) == "Nd"


def is_white_space(ch: str) -> bool:
    return ch in WHITE_SPACE


def is_valid_extension_dot(index: int, length: int) -> bool:
    """A dot separates an extension only inside the last EXTENSION_LEN characters, never as the final one."""
    return length - EXTENSION_LEN <= index < length - 1


def classify(ch: str, index: int, length: int) -> CharPolicy:
    if is_latin(ch) or is_decimal_digit(ch):
        return CharPolicy.KEEP
    if ch in ALLOWED_PUNCTUATION:
        return CharPolicy.KEEP
    if is_white_space(ch):
        return CharPolicy.UNDERSCORE
    if ch == "." and is_valid_extension_dot(index, length):
        return CharPolicy.SEPARATOR
    return CharPolicy.PLACEHOLDER
