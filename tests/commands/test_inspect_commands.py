"""Tests for the origin and head commands."""

import json
from pathlib import Path

from click.testing import CliRunner

from reltag.cli.cli import cli
from reltag.context import context_for_test
from reltag.gateway.git.fake import FakeGit

ROOT = Path("/fake/repo")
COMMIT = "a1b2c3d4e5" * 4


def _git(**kwargs) -> FakeGit:
    return FakeGit.for_repository(ROOT, head_commit=COMMIT, **kwargs)


def test_origin_prints_kind_name_and_url() -> None:
    git = _git(remote_urls={"origin": ["git@github.com:acme/widget.git"]})
    ctx = context_for_test(git=git, basedir=ROOT)

    result = CliRunner().invoke(cli, ["origin"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert result.output == "github\tacme/widget\tgit@github.com:acme/widget.git\n"


def test_origin_json() -> None:
    git = _git(remote_urls={"origin": ["https://gitlab.com/acme/widget.git"]})
    ctx = context_for_test(git=git, basedir=ROOT)

    result = CliRunner().invoke(cli, ["origin", "--json"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {
        "kind": "gitlab",
        "owner": "acme",
        "name": "widget",
        "url": "https://gitlab.com/acme/widget.git",
    }


def test_origin_missing_remote_is_an_error() -> None:
    ctx = context_for_test(git=_git(), basedir=ROOT)

    result = CliRunner().invoke(cli, ["origin"], obj=ctx)

    assert result.exit_code == 1
    assert "Repository doesn't have an 'origin' remote" in result.output


def test_head_prints_ids_and_branch() -> None:
    ctx = context_for_test(git=_git(branch="main"), basedir=ROOT)

    result = CliRunner().invoke(cli, ["head"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert result.output == f"{COMMIT[:7]}\t{COMMIT}\tmain\n"


def test_head_json_detached() -> None:
    ctx = context_for_test(git=_git(branch=None), basedir=ROOT)

    result = CliRunner().invoke(cli, ["head", "--json"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {
        "short_id": COMMIT[:7],
        "full_id": COMMIT,
        "branch": "",
        "detached": True,
    }


def test_head_json_on_branch() -> None:
    ctx = context_for_test(git=_git(branch="main"), basedir=ROOT)

    result = CliRunner().invoke(cli, ["head", "--json"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {
        "short_id": COMMIT[:7],
        "full_id": COMMIT,
        "branch": "main",
        "detached": False,
    }


def test_head_outside_repository() -> None:
    ctx = context_for_test(git=FakeGit(), basedir=ROOT)

    result = CliRunner().invoke(cli, ["head"], obj=ctx)

    assert result.exit_code == 1
    assert "No git repository found" in result.output


def test_help_lists_commands() -> None:
    result = CliRunner().invoke(cli, ["-h"])

    assert result.exit_code == 0
    for command in ("origin", "head", "tags", "tag-exists", "tag", "delete-tag"):
        assert command in result.output
