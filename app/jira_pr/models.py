from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class RepoCoordinates:
    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass(frozen=True)
class BranchPair:
    head: str
    base: str


@dataclass(frozen=True)
class PullRequestRequest:
    title: str
    body: str
    head: str
    base: str
    draft: bool = True

    def to_payload(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PullRequestResult:
    url: str
    html_url: Optional[str] = None
    number: Optional[int] = None
