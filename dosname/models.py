from __future__ import annotations

from dataclasses import dataclass, field

# FAT12/16 8.3 limits; the extension length counts the separating dot.
BASE_LEN = 8
EXTENSION_LEN = 4

PLACEHOLDER = "X"


@dataclass(slots=True)
class Issue:
    level: str  # info | warning | error
    code: str
    message: str


@dataclass(slots=True)
class NameResult:
    source: str
    dos_name: str
    status: str  # ok | warning | error
    issues: list[Issue] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return self.dos_name != self.source


@dataclass(slots=True)
class ListingSummary:
    names: list[NameResult]
    profile: str = "emulator"

    @property
    def has_errors(self) -> bool:
        return any(n.status == "error" for n in self.names)

    @property
    def has_warnings(self) -> bool:
        return any(n.status == "warning" for n in self.names)

    def to_dict(self) -> dict:
        names: list[dict] = []
        for item in self.names:
            names.append(
                {
                    "source": item.source,
                    "dos_name": item.dos_name,
                    "status": item.status,
                    "issues": [{"level": issue.level, "code": issue.code, "message": issue.message} for issue in item.issues],
                }
            )
        return {"profile": self.profile, "names": names}
