"""CLI for the Tumblr API client (blog info, posts, avatar)."""

from typing import Annotated, Any

import typer
from loguru import logger

from tumblr_api.api import TumblrApi
from tumblr_api.errors import TumblrError
from tumblr_api.logging_config import configure_logging
from tumblr_api.models import Post
from tumblr_api.queries import get_avatar, get_blog_info, get_posts

app = typer.Typer(help="Query the Tumblr v2 API: blog info, posts and avatars.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


def _client(api_key: str | None) -> TumblrApi:
    try:
        return TumblrApi(api_key)
    except RuntimeError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e


def _summary_line(post: Post) -> str:
    text = post.summary or post.slug or post.post_url
    return f"  [{post.type}] {post.id}  {text[:80]}"


@app.command()
def info(
    name: str = typer.Argument(..., help="Blog name or domain"),
    api_key: Annotated[
        str | None,
        typer.Option("--api-key", "-k", envvar="TUMBLR_API_KEY", help="Tumblr API key"),
    ] = None,
) -> None:
    """Print a blog's metadata as JSON."""
    client = _client(api_key)
    try:
        blog = get_blog_info(client, name)
    except TumblrError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e
    typer.echo(str(blog))


@app.command()
def posts(
    name: str = typer.Argument(..., help="Blog name or domain"),
    limit: int = typer.Option(20, "--limit", "-n", help="Posts per page (Tumblr caps at 20)"),
    offset: int = typer.Option(0, "--offset", "-o", help="Post number to start at"),
    post_type: Annotated[
        str | None,
        typer.Option("--type", "-t", help="Only posts of this type (text, photo, ...)"),
    ] = None,
    tag: Annotated[str | None, typer.Option("--tag", help="Only posts with this tag")] = None,
    npf: bool = typer.Option(False, "--npf", help="Request posts in Neue Post Format"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
    api_key: Annotated[
        str | None,
        typer.Option("--api-key", "-k", envvar="TUMBLR_API_KEY", help="Tumblr API key"),
    ] = None,
) -> None:
    """List one page of a blog's posts."""
    params: dict[str, Any] = {"limit": limit, "offset": offset}
    if post_type:
        params["type"] = post_type
    if tag:
        params["tag"] = tag
    if npf:
        params["npf"] = "true"

    client = _client(api_key)
    try:
        result = get_posts(client, name, params)
    except TumblrError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e

    if output_json:
        typer.echo(str(result))
        return

    typer.echo(f"{result.total_posts} posts (showing {len(result)}):\n")
    for post in result:
        typer.echo(_summary_line(post))


@app.command()
def avatar(
    name: str = typer.Argument(..., help="Blog name or domain"),
    size: Annotated[
        int | None,
        typer.Option("--size", "-s", help="Square size in pixels (16 to 512)"),
    ] = None,
    api_key: Annotated[
        str | None,
        typer.Option("--api-key", "-k", envvar="TUMBLR_API_KEY", help="Tumblr API key"),
    ] = None,
) -> None:
    """Print the URL of a blog's avatar."""
    client = _client(api_key)
    try:
        url = get_avatar(client, name, size)
    except TumblrError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e
    typer.echo(url)
