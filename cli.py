import typer
from typing import Optional

from src.core.config import settings
from src.core.exceptions import ClientException
from src.core.response.schemas import PostDbResponse
from src.apps.posts.client import PostClient

app = typer.Typer(help="CLI for the post server.")


# ---------------------------
# Helpers
# ---------------------------
def get_client(url: str) -> PostClient:
    """Build a client for the server at ``url``."""
    return PostClient(base_url=url)


def url_option():
    return typer.Option(settings.API_URL, "--url", "-u", help="Base URL of the post server")


def call(url: str, action) -> PostDbResponse:
    """Run ``action`` against a fresh client, exiting on transport errors."""
    try:
        with get_client(url) as client:
            return action(client)
    except ClientException as e:
        print(f"❌ {e.detail}")
        raise typer.Exit(1)


def fail(message: str):
    print(f"❌ {message}")
    raise typer.Exit(1)


# ---------------------------
# Commands
# ---------------------------
@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Interface to bind, defaults to HOST"),
    port: Optional[int] = typer.Option(None, help="Port to bind, defaults to PORT"),
    reload: bool = typer.Option(False, help="Enable auto-reload in development"),
):
    """Start the post server."""
    from src.main import run

    run(host=host, port=port, reload=reload)


@app.command("list")
def list_posts(url: str = url_option()):
    """List all posts."""
    response = call(url, lambda client: client.get_posts())
    if not response.is_ok:
        fail("Could not fetch posts.")

    if not response.value:
        print("📭 No posts yet.")
        return
    for post in response.value:
        print(f"{post.post_id}: {post.content}")


@app.command()
def get(post_id: int, url: str = url_option()):
    """Show a single post."""
    response = call(url, lambda client: client.get_post(post_id))
    if not response.is_ok:
        fail(f"Post {post_id} not found.")

    post = response.value
    print(f"{post.post_id}: {post.content}")


@app.command()
def add(content: str, url: str = url_option()):
    """Create a post."""
    response = call(url, lambda client: client.add_post(content))
    if not response.is_ok:
        fail("Could not add post.")
    print(f"✅ Added new post id {response.value}")


@app.command()
def update(post_id: int, content: str, url: str = url_option()):
    """Replace a post's content."""
    response = call(url, lambda client: client.update_post(post_id, content))
    if not response.is_ok:
        fail(f"Post {post_id} not found.")
    print(f"✅ Updated post id {response.value}")


@app.command()
def delete(post_id: int, url: str = url_option()):
    """Delete a post."""
    response = call(url, lambda client: client.delete_post(post_id))
    if not response.is_ok:
        fail(f"Post {post_id} not found.")
    print(f"🗑️  Deleted post id {response.value}")


# ---------------------------
# Entrypoint
# ---------------------------
if __name__ == "__main__":
    app()
