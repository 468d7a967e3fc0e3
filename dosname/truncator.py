from __future__ import annotations

from dosname.models import BASE_LEN, EXTENSION_LEN

COLLISION_SUFFIX = "~1"


def split_extension(filename: str) -> tuple[str, str]:
    """Split at the last dot; the extension keeps its dot and is empty when there is none."""
    dot = filename.rfind(".")
    if dot < 0:
        return filename, ""
    return filename[:dot], filename[dot:]


def truncate(filename: str) -> str:
    """Return the filename in an MS-DOS 8.3 friendly form.

    "my backup collection.7zip" becomes "my bac~1.7zi". The base may be up to
    BASE_LEN characters; an over-long base is cut and suffixed with "~1".
    """
    base, extension = split_extension(filename)
    if len(base) <= BASE_LEN and len(extension) <= EXTENSION_LEN:
        return filename

    if len(base) > BASE_LEN:
        return base[: BASE_LEN - len(COLLISION_SUFFIX)] + COLLISION_SUFFIX + extension[:EXTENSION_LEN]
    return base + extension[:EXTENSION_LEN]
