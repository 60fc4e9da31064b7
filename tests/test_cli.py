"""CLI commands driven against an in-process app."""

import pytest
from fastapi.testclient import TestClient
from typer.testing import CliRunner

import cli
from src.apps.posts.client import PostClient

runner = CliRunner()


@pytest.fixture(autouse=True)
def local_server(app, monkeypatch):
    monkeypatch.setattr(cli, "get_client", lambda url: PostClient(http_client=TestClient(app)))


def test_list_empty():
    result = runner.invoke(cli.app, ["list"])
    assert result.exit_code == 0
    assert "No posts yet" in result.output


def test_add_then_list():
    result = runner.invoke(cli.app, ["add", "adding content"])
    assert result.exit_code == 0
    assert "Added new post id 1" in result.output

    result = runner.invoke(cli.app, ["list"])
    assert "1: adding content" in result.output


def test_get_update_delete(store):
    store.create_post("original")

    result = runner.invoke(cli.app, ["get", "1"])
    assert "1: original" in result.output

    result = runner.invoke(cli.app, ["update", "1", "edited"])
    assert result.exit_code == 0
    assert store.get_post(1).value.content == "edited"

    result = runner.invoke(cli.app, ["delete", "1"])
    assert result.exit_code == 0
    assert store.get_posts() == []


def test_missing_post_exits_with_error():
    result = runner.invoke(cli.app, ["get", "9"])
    assert result.exit_code == 1
    assert "Post 9 not found" in result.output

    result = runner.invoke(cli.app, ["delete", "9"])
    assert result.exit_code == 1
