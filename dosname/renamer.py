"""FAT12/16 character legalization.

Many legacy archive formats such as ZIP and LHA were usable on several
operating systems, so their listings can hold names that PKZIP or LHA show on
MS-DOS but that cannot exist on a FAT12/16 volume or inside an emulator.
``rename`` maps such a name onto the FAT character set; it never enforces the
8.3 length limit, see ``dosname.truncator`` for that.
"""

from __future__ import annotations

from dosname.classifier import WHITE_SPACE, CharPolicy, classify
from dosname.models import BASE_LEN, PLACEHOLDER
from dosname.normalizer import strip_diacritics
from dosname.truncator import split_extension, truncate


def _prepare(filename: str) -> str:
    return strip_diacritics(filename.strip(WHITE_SPACE).upper())


def _policies(text: str) -> list[CharPolicy]:
    length = len(text)
    return [classify(ch, index, length) for index, ch in enumerate(text)]


def rename(filename: str) -> str:
    text = _prepare(filename)
    out: list[str] = []
    for ch, policy in zip(text, _policies(text)):
        if policy is CharPolicy.UNDERSCORE:
            out.append("_")
        elif policy is CharPolicy.PLACEHOLDER:
            out.append(PLACEHOLDER)
        else:
            out.append(ch)
    return "".join(out)


def needs_rename(filename: str) -> bool:
    """True when the name as stored would not be usable on a FAT12/16 file system."""
    return rename(filename) != filename


def placeholder_count(filename: str) -> int:
    """Number of characters ``rename`` could not represent and replaced with the placeholder."""
    text = _prepare(filename)
    return sum(1 for policy in _policies(text) if policy is CharPolicy.PLACEHOLDER)


def to_dos_name(filename: str) -> str:
    return truncate(rename(filename))


def dir_name(name: str) -> str:
    """FAT12/16 directory name: renamed, base cut to BASE_LEN with no "~1" suffix.

    A directory may still carry an extension, which is left as ``rename`` produced it.
    """
    base, extension = split_extension(rename(name))
    return base[:BASE_LEN] + extension
