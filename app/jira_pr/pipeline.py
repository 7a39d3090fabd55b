from __future__ import annotations

from typing import Optional

from github import Github
from jira import JIRA

from .config import Config
from .git_utils import GitInspector, SubprocessGitInspector, resolve_branches
from .github_utils import build_pull_request, create_pull_request, get_github_client
from .jira_client import fetch_issue_summary, get_jira_client
from .models import PullRequestResult


def _step(number: int, title: str, first: bool = False) -> None:
    if not first:
        print()
    print(f"📄 STEP {number}: {title}")
    print("-" * 30)


def run_pipeline(
    config: Config,
    git: Optional[GitInspector] = None,
    jira: Optional[JIRA] = None,
    gh: Optional[Github] = None,
) -> PullRequestResult:
    """Resolve branches, look up the issue and open the draft PR.

    Any step raising stops the run; GitHub is only contacted once every
    earlier step has succeeded.
    """
    git = git or SubprocessGitInspector()

    _step(1, "Resolving branches", first=True)
    if config.base_branch:
        print(f"🌿 Using base branch override: {config.base_branch}")
    branches = resolve_branches(git, config.base_branch)
    print(f"🌿 Using current branch as source branch: {branches.head}")
    print(f"🌿 Base branch: {branches.base}")

    _step(2, "Extracting repository information")
    coords = git.remote_owner_repo()
    print(f"📁 GitHub Owner: {coords.owner}, Repo: {coords.repo}")

    _step(3, "Fetching Jira ticket")
    owns_jira = jira is None
    jira = jira or get_jira_client(config)
    try:
        summary = fetch_issue_summary(jira, config.issue_key)
    finally:
        if owns_jira:
            jira.close()
    print(f"🎫 Fetched JIRA issue title: {summary}")

    _step(4, "Creating pull request")
    request = build_pull_request(config, summary, branches)
    owns_gh = gh is None
    if owns_gh:
        print(f"🔐 GitHub token: {config.masked_github_token} (masked)")
        gh = get_github_client(config.github_token)
    try:
        result = create_pull_request(gh, coords, request)
    finally:
        if owns_gh:
            gh.close()

    print()
    print("🎉 SUCCESS!")
    print("=" * 50)
    print(f"🔗 Pull request URL: {result.url}")
    if result.html_url:
        print(f"🌐 View in browser: {result.html_url}")
    print(f"🎫 Ticket: {config.issue_key}")
    return result
