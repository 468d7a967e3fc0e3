from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

UNKNOWN_VERSION = "0.0.0+unknown"


def get_app_version() -> str:
    try:
        return version("dosname")
    except PackageNotFoundError:
        return UNKNOWN_VERSION
