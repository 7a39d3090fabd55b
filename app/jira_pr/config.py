from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from importlib import metadata
from typing import List, Mapping, Optional, Sequence

from .errors import ConfigError

JIRA_BASE_URL = "JIRA_BASE_URL"
JIRA_EMAIL = "JIRA_EMAIL"
JIRA_API_TOKEN = "JIRA_API_TOKEN"
GITHUB_TOKEN = "GITHUB_TOKEN"
REQUIRED_ENV = (JIRA_BASE_URL, JIRA_EMAIL, JIRA_API_TOKEN, GITHUB_TOKEN)


def mask_secret(secret: str) -> str:
    """Show just enough of a token to tell which one is in use."""
    if len(secret) <= 14:
        return "*" * len(secret)
    return f"{secret[:10]}...{secret[-4:]}"


@dataclass(frozen=True)
class Config:
    issue_key: str
    base_branch: Optional[str]
    jira_base_url: str
    jira_email: str
    jira_api_token: str
    github_token: str

    @property
    def masked_jira_token(self) -> str:
        return mask_secret(self.jira_api_token)

    @property
    def masked_github_token(self) -> str:
        return mask_secret(self.github_token)


def _package_version() -> str:
    try:
        return metadata.version("jira-pr")
    except metadata.PackageNotFoundError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jira-pr",
        description="Open a draft GitHub pull request titled after a JIRA issue",
    )
    parser.add_argument("-issue", "--issue", default="", help="The JIRA issue key (e.g., PROJECT-123)")
    parser.add_argument("-base", "--base", default="", help="The base branch for the pull request (defaults to the remote HEAD)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def load_config(argv: Optional[Sequence[str]] = None, environ: Optional[Mapping[str, str]] = None) -> Config:
    """Read flags and environment into a Config.

    Every missing value is collected before raising, so a single ConfigError
    names all of them.
    """
    args = parse_args(argv)
    env = os.environ if environ is None else environ

    issue_key = (args.issue or "").strip()
    base_branch = (args.base or "").strip() or None
    values = {name: (env.get(name) or "").strip() for name in REQUIRED_ENV}

    missing: List[str] = []
    if not issue_key:
        missing.append("-issue")
    missing.extend(name for name in REQUIRED_ENV if not values[name])
    if missing:
        raise ConfigError(missing)

    return Config(
        issue_key=issue_key,
        base_branch=base_branch,
        jira_base_url=values[JIRA_BASE_URL].rstrip("/"),
        jira_email=values[JIRA_EMAIL],
        jira_api_token=values[JIRA_API_TOKEN],
        github_token=values[GITHUB_TOKEN],
    )
