#!/usr/bin/env python3
"""
JIRA PR Generator

Thin entrypoint that delegates to the modular package in `app/jira_pr/`.
"""
from __future__ import annotations

from jira_pr.cli import run


if __name__ == "__main__":
    run()
