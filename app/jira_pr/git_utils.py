from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List, Optional, Protocol

from .errors import GitError, ParseError
from .models import BranchPair, RepoCoordinates


def run_git(args: List[str], cwd: str | Path | None = None) -> str:
    cmd = ["git", *args]
    try:
        proc = subprocess.run(cmd, cwd=cwd, text=True, capture_output=True)
    except OSError as e:
        raise GitError(f"Could not run {' '.join(cmd)}: {e}", command=cmd) from e
    if proc.returncode != 0:
        raise GitError(
            f"{' '.join(cmd)} failed",
            command=cmd,
            returncode=proc.returncode,
            stderr=(proc.stderr or "").strip(),
        )
    return (proc.stdout or "").strip()


def _strip_git_suffix(value: str) -> str:
    if value.endswith(".git"):
        return value[: -len(".git")]
    return value


def parse_remote_url(url: str) -> RepoCoordinates:
    """Split a GitHub remote URL into owner and repo.

    Accepts ``https://host/<owner>/<repo>[.git]`` (extra leading path segments
    are ignored) and ``git@host:<owner>/<repo>[.git]``.
    """
    cleaned = url.strip()
    owner = repo = ""

    if cleaned.startswith("https://"):
        remainder = _strip_git_suffix(cleaned[len("https://"):])
        # first segment is the host
        path_segments = remainder.split("/")[1:]
        if len(path_segments) >= 2:
            owner, repo = path_segments[-2], path_segments[-1]
    elif cleaned.startswith("git@"):
        parts = _strip_git_suffix(cleaned).split(":")
        if len(parts) == 2:
            sub_parts = parts[1].split("/")
            if len(sub_parts) == 2:
                owner, repo = sub_parts

    if not owner or not repo:
        raise ParseError(url)
    return RepoCoordinates(owner=owner, repo=repo)


class GitInspector(Protocol):
    def current_branch(self) -> str: ...

    def default_branch(self) -> str: ...

    def remote_owner_repo(self) -> RepoCoordinates: ...


class SubprocessGitInspector:
    """Answers repository questions by shelling out to the local git binary."""

    def __init__(self, cwd: str | Path | None = None):
        self.cwd = cwd

    def current_branch(self) -> str:
        branch = run_git(["rev-parse", "--abbrev-ref", "HEAD"], cwd=self.cwd)
        if not branch:
            raise GitError("git rev-parse returned no branch name")
        if branch == "HEAD":
            raise GitError("HEAD is detached; check out a branch before opening a pull request")
        return branch

    def default_branch(self) -> str:
        ref = run_git(["symbolic-ref", "refs/remotes/origin/HEAD"], cwd=self.cwd)
        branch = ref.split("/")[-1]
        if not branch:
            raise GitError(f"Could not parse default branch from output: {ref!r}")
        return branch

    def remote_owner_repo(self) -> RepoCoordinates:
        url = run_git(["config", "--get", "remote.origin.url"], cwd=self.cwd)
        return parse_remote_url(url)


def resolve_branches(git: GitInspector, base_override: Optional[str] = None) -> BranchPair:
    """Return the BranchPair for the PR; the default branch is only looked up without an override."""
    head = git.current_branch()
    base = base_override or git.default_branch()
    return BranchPair(head=head, base=base)
