from __future__ import annotations

import logging
import re

from dosname.classifier import WHITE_SPACE
from dosname.config import Profile
from dosname.models import Issue, ListingSummary, NameResult
from dosname.renamer import placeholder_count, rename
from dosname.truncator import split_extension, truncate

logger = logging.getLogger(__name__)

# CRLF first so it is not counted as two breaks; bare CR covers 8-bit micro listings.
LINE_BREAK_RE = re.compile(r"\r\n|\n|\r")

ARCHIVE_EXTENSIONS = (".zip", ".lha", ".lzh", ".arc", ".arj")
# Launch preference order.
PROGRAM_EXTENSIONS = (".bat", ".com", ".exe")


def archive_paths(listing: str) -> list[str]:
    if not listing:
        return []
    return [entry for entry in LINE_BREAK_RE.split(listing) if entry.strip(WHITE_SPACE)]


def _extension(path: str) -> str:
    return split_extension(path.replace("\\", "/").rsplit("/", 1)[-1])[1].lower()


def _depth(path: str) -> int:
    return path.replace("\\", "/").strip("/").count("/")


def binaries(paths: list[str]) -> list[str]:
    return [path for path in paths if _extension(path) in PROGRAM_EXTENSIONS]


def binary(paths: list[str]) -> str:
    """Most likely program in the listing: .bat, then .com, then .exe, shallowest path first."""
    ordered = sorted(paths, key=_depth)
    for extension in PROGRAM_EXTENSIONS:
        for path in ordered:
            if _extension(path) == extension:
                return path
    return ""


def find_named(filename: str, paths: list[str]) -> str:
    """Root program sharing the archive's name, e.g. MYAPP.EXE inside myapp.zip."""
    if not filename or not paths:
        return ""
    stem = split_extension(filename.replace("\\", "/").rsplit("/", 1)[-1])[0].lower()
    root = [path for path in paths if _depth(path) == 0]
    for candidate in (f"{stem}.exe", f"{stem}.com", f"{stem}.bat"):
        for path in root:
            if path.lower() == candidate:
                return path
    return ""


def find_binary(filename: str, listing: str) -> str:
    """Program to launch for an archive, given its content listing.

    A non-archive filename is returned as is, and so is any filename without a
    listing. An empty string means no program was found.
    """
    if not filename:
        return ""
    if not listing:
        return filename
    if _extension(filename) not in ARCHIVE_EXTENSIONS:
        return filename

    paths = archive_paths(listing)
    programs = binaries(paths)
    if not programs:
        return ""
    if len(programs) == 1:
        return programs[0]
    return find_named(filename, paths) or binary(paths)


def detect_status(issues: list[Issue]) -> str:
    if any(i.level == "error" for i in issues):
        return "error"
    if any(i.level == "warning" for i in issues):
        return "warning"
    return "ok"


def analyze_name(name: str, profile: Profile) -> NameResult:
    issues: list[Issue] = []
    if not name.strip(WHITE_SPACE):
        issues.append(Issue("error", "empty_name", "Empty filename."))
        return NameResult(source=name, dos_name="", status="error", issues=issues)

    dos_name = name
    if profile.rename:
        dos_name = rename(name)
        if dos_name != name:
            issues.append(Issue("warning", "charset_rename", f"Not a FAT12/16 legal name: {name}"))
        lost = placeholder_count(name)
        if lost:
            issues.append(
                Issue("warning", "placeholder_used", f"{lost} unrepresentable character(s) replaced with 'X'.")
            )

    if profile.truncate:
        shortened = truncate(dos_name)
        if shortened != dos_name:
            issues.append(Issue("info", "length_truncate", f"Shortened to 8.3: {dos_name} -> {shortened}"))
        dos_name = shortened

    if dos_name != name:
        logger.debug("%s -> %s", name, dos_name)
    return NameResult(source=name, dos_name=dos_name, status=detect_status(issues), issues=issues)


def analyze_names(names: list[str], profile: Profile) -> ListingSummary:
    results = [analyze_name(name, profile) for name in names]
    logger.debug("analyzed %d name(s) with profile %s", len(results), profile.name)
    return ListingSummary(names=results, profile=profile.name)
