"""Tests for the tumblr-api CLI."""

import json
from collections.abc import Iterator
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from tests.unit.fakes import FakeClient
from tests.unit.samples import BLOG_INFO_ENVELOPE, NPF_POST
from tumblr_api.cli import app

runner = CliRunner()


@pytest.fixture
def cli_client() -> Iterator[FakeClient]:
    """Route the CLI's TumblrApi to a FakeClient."""
    client = FakeClient()
    with patch("tumblr_api.cli.TumblrApi", return_value=client):
        yield client


def test_info_prints_blog_json(cli_client: FakeClient) -> None:
    cli_client.add_response("/blog/staff.tumblr.com/info", BLOG_INFO_ENVELOPE)

    result = runner.invoke(app, ["info", "staff", "--api-key", "k"])

    assert result.exit_code == 0
    assert json.loads(result.output)["title"] == "Tumblr Staff"


def test_posts_builds_query_params(cli_client: FakeClient) -> None:
    cli_client.add_response(
        "/blog/staff.tumblr.com/posts", {"response": {"posts": [NPF_POST], "total_posts": 3}}
    )

    result = runner.invoke(
        app, ["posts", "staff", "-n", "1", "--type", "text", "--tag", "news", "--npf", "-k", "k"]
    )

    assert result.exit_code == 0
    assert "3 posts (showing 1)" in result.output
    assert "[blocks] 7001" in result.output
    _, params = cli_client.calls[0]
    assert params == {"limit": 1, "offset": 0, "type": "text", "tag": "news", "npf": "true"}


def test_posts_json_output(cli_client: FakeClient) -> None:
    cli_client.add_response(
        "/blog/staff.tumblr.com/posts", {"response": {"posts": [NPF_POST], "total_posts": 1}}
    )

    result = runner.invoke(app, ["posts", "staff", "--json", "-k", "k"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["total_posts"] == 1
    assert data["posts"][0]["id"] == 7001


def test_avatar_prints_location(cli_client: FakeClient) -> None:
    cli_client.add_response(
        "/blog/staff.tumblr.com/avatar/128", headers={"Location": "https://x/128.png"}
    )

    result = runner.invoke(app, ["avatar", "staff", "--size", "128", "-k", "k"])

    assert result.exit_code == 0
    assert result.output.strip() == "https://x/128.png"


def test_library_error_exits_nonzero(cli_client: FakeClient) -> None:
    cli_client.add_response("/blog/staff.tumblr.com/avatar")

    result = runner.invoke(app, ["avatar", "staff", "-k", "k"])

    assert result.exit_code == 1


def test_missing_api_key_exits_nonzero() -> None:
    with patch("tumblr_api.cli.TumblrApi", side_effect=RuntimeError("no key")):
        result = runner.invoke(app, ["info", "staff"])

    assert result.exit_code == 1
