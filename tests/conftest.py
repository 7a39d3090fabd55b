from __future__ import annotations

import pytest

from jira_pr.config import Config
from jira_pr.models import RepoCoordinates


@pytest.fixture
def env() -> dict:
    return {
        "JIRA_BASE_URL": "https://example.atlassian.net",
        "JIRA_EMAIL": "dev@example.com",
        "JIRA_API_TOKEN": "jira-token-0123456789abcd",
        "GITHUB_TOKEN": "ghp_0123456789abcdefwxyz",
    }


@pytest.fixture
def config() -> Config:
    return Config(
        issue_key="PROJ-42",
        base_branch=None,
        jira_base_url="https://example.atlassian.net",
        jira_email="dev@example.com",
        jira_api_token="jira-token-0123456789abcd",
        github_token="ghp_0123456789abcdefwxyz",
    )


class FakeGit:
    """GitInspector double that records which queries ran."""

    def __init__(self, head="feature/login", default="main", coords=None):
        self.head = head
        self.default = default
        self.coords = coords or RepoCoordinates("acme", "widgets")
        self.calls = []

    def current_branch(self) -> str:
        self.calls.append("current_branch")
        return self.head

    def default_branch(self) -> str:
        self.calls.append("default_branch")
        return self.default

    def remote_owner_repo(self) -> RepoCoordinates:
        self.calls.append("remote_owner_repo")
        return self.coords


@pytest.fixture
def fake_git() -> FakeGit:
    return FakeGit()
