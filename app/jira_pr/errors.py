from __future__ import annotations

from typing import Iterable, List, Optional


class PRGenError(Exception):
    """Base class for every failure that aborts a run."""


class ConfigError(PRGenError):
    def __init__(self, missing: Iterable[str]):
        self.missing: List[str] = list(missing)
        super().__init__(f"Missing required configuration: {', '.join(self.missing)}")


class GitError(PRGenError):
    def __init__(
        self,
        message: str,
        command: Optional[List[str]] = None,
        returncode: Optional[int] = None,
        stderr: Optional[str] = None,
    ):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        detail = message
        if returncode is not None:
            detail += f" (exit code {returncode})"
        if stderr:
            detail += f": {stderr}"
        super().__init__(detail)


class ParseError(PRGenError):
    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Could not parse owner and repo from URL: {url!r}")


class IssueFetchError(PRGenError):
    """JIRA did not hand back the issue. ``status`` is None on transport failures."""

    def __init__(self, status: Optional[int], body: str = "", message: Optional[str] = None):
        self.status = status
        self.body = body
        if message is None:
            if status is None:
                message = f"Failed to fetch JIRA issue: {body}"
            else:
                message = f"Failed to fetch JIRA issue. Status: {status}"
                if body:
                    message += f"\n{body}"
        super().__init__(message)


class DecodeError(IssueFetchError):
    def __init__(self, reason: str, status: Optional[int] = 200):
        self.reason = reason
        super().__init__(status, reason, message=f"Error decoding JIRA response: {reason}")


class PRCreationError(PRGenError):
    def __init__(self, status: Optional[int], body: str = ""):
        self.status = status
        self.body = body
        if status is None:
            message = f"Failed to create pull request: {body}"
        else:
            message = f"Failed to create pull request. Status: {status}\n{body}"
        super().__init__(message)
