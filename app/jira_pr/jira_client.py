from __future__ import annotations

import json

import requests
from jira import JIRA
from jira.exceptions import JIRAError

from .config import Config
from .errors import DecodeError, IssueFetchError


def get_jira_client(config: Config) -> JIRA:
    print("🔗 Connecting to Jira...")
    print(f"   Server: {config.jira_base_url}")
    print(f"   Email: {config.jira_email}")
    print(f"   Token: {config.masked_jira_token} (masked)")
    return JIRA(
        server=config.jira_base_url,
        basic_auth=(config.jira_email, config.jira_api_token),
        options={"rest_api_version": "3", "headers": {"Accept": "application/json"}},
        get_server_info=False,
        max_retries=0,
    )


def fetch_issue_summary(jira: JIRA, issue_key: str) -> str:
    """GET /rest/api/3/issue/{key} and return ``fields.summary``."""
    print(f"📋 Fetching Jira issue: {issue_key}")
    try:
        issue = jira.issue(issue_key)
    except JIRAError as e:
        raise IssueFetchError(e.status_code, e.text or "") from e
    except (requests.exceptions.JSONDecodeError, json.JSONDecodeError) as e:
        # subclass of RequestException, so it must be matched first
        raise DecodeError(f"response body is not JSON: {e}") from e
    except (NotImplementedError, AttributeError, TypeError) as e:
        # jira refuses empty or non-object payloads while building the Issue
        raise DecodeError(f"response body is not an issue object: {e}") from e
    except requests.exceptions.RequestException as e:
        raise IssueFetchError(None, str(e)) from e

    fields = getattr(issue, "fields", None)
    summary = getattr(fields, "summary", None)
    if not isinstance(summary, str):
        raise DecodeError(f"issue {issue_key} has no string fields.summary")
    print(f"   ✅ Found issue: {summary}")
    return summary
