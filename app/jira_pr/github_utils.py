from __future__ import annotations

import json

import requests
from github import Auth, Github

from .config import Config
from .errors import PRCreationError
from .models import BranchPair, PullRequestRequest, PullRequestResult, RepoCoordinates

GITHUB_API_URL = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"


class BearerToken(Auth.Token):
    """Personal access token sent as ``Authorization: Bearer <token>``."""

    @property
    def token_type(self) -> str:
        return "Bearer"


def get_github_client(token: str) -> Github:
    return Github(base_url=GITHUB_API_URL, auth=BearerToken(token), retry=None)


def build_pull_request(config: Config, summary: str, branches: BranchPair) -> PullRequestRequest:
    return PullRequestRequest(
        title=f"[{config.issue_key}] {summary}",
        body=f"{config.jira_base_url}/browse/{config.issue_key}",
        head=branches.head,
        base=branches.base,
        draft=True,
    )


def create_pull_request(gh: Github, coords: RepoCoordinates, request: PullRequestRequest) -> PullRequestResult:
    print(f"🔄 Creating pull request...")
    print(f"   📁 Repository: {coords.full_name}")
    print(f"   🌿 Source branch: {request.head}")
    print(f"   🌿 Target branch: {request.base}")
    print(f"   🏷️ Title: {request.title}")
    try:
        status, _headers, body = gh.requester.requestJson(
            "POST",
            f"/repos/{coords.owner}/{coords.repo}/pulls",
            headers={
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": GITHUB_API_VERSION,
            },
            input=request.to_payload(),
        )
    except requests.exceptions.RequestException as e:
        raise PRCreationError(None, str(e)) from e

    if status != 201:
        raise PRCreationError(status, body or "")

    try:
        data = json.loads(body)
    except (TypeError, ValueError) as e:
        raise PRCreationError(status, body or "") from e
    url = data.get("url") if isinstance(data, dict) else None
    if not isinstance(url, str) or not url:
        raise PRCreationError(status, body or "")

    result = PullRequestResult(url=url, html_url=data.get("html_url"), number=data.get("number"))
    print(f"   ✅ Pull request created" + (f": #{result.number}" if result.number is not None else ""))
    return result
