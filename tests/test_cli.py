"""Tests for the command-line entrypoint and its exit codes."""

from unittest.mock import patch

from jira_pr.cli import main
from jira_pr.errors import IssueFetchError, PRCreationError
from jira_pr.models import PullRequestResult


def _set_env(monkeypatch, env: dict) -> None:
    for name, value in env.items():
        monkeypatch.setenv(name, value)


def test_main_success_returns_zero(monkeypatch, env) -> None:
    _set_env(monkeypatch, env)
    result = PullRequestResult(url="https://api.github.com/repos/acme/widgets/pulls/7")
    with patch("jira_pr.cli.run_pipeline", return_value=result) as mock_run:
        assert main(["-issue", "PROJ-42", "-base", "main"]) == 0
    config = mock_run.call_args[0][0]
    assert config.issue_key == "PROJ-42"
    assert config.base_branch == "main"


def test_main_missing_env_fails_before_pipeline(monkeypatch, env, capsys) -> None:
    _set_env(monkeypatch, env)
    monkeypatch.delenv("GITHUB_TOKEN")
    with patch("jira_pr.cli.run_pipeline") as mock_run:
        assert main(["-issue", "PROJ-42"]) == 1
    mock_run.assert_not_called()
    err = capsys.readouterr().err
    assert "GITHUB_TOKEN" in err


def test_main_reports_fetch_error(monkeypatch, env, capsys) -> None:
    _set_env(monkeypatch, env)
    with patch("jira_pr.cli.run_pipeline", side_effect=IssueFetchError(404, "Issue does not exist")):
        assert main(["-issue", "PROJ-404"]) == 1
    err = capsys.readouterr().err
    assert "404" in err


def test_main_reports_github_body(monkeypatch, env, capsys) -> None:
    _set_env(monkeypatch, env)
    raw = '{"message":"Validation Failed"}'
    with patch("jira_pr.cli.run_pipeline", side_effect=PRCreationError(422, raw)):
        assert main(["-issue", "PROJ-42"]) == 1
    err = capsys.readouterr().err
    assert "422" in err
    assert raw in err


def test_main_interrupted(monkeypatch, env) -> None:
    _set_env(monkeypatch, env)
    with patch("jira_pr.cli.run_pipeline", side_effect=KeyboardInterrupt):
        assert main(["-issue", "PROJ-42"]) == 130
