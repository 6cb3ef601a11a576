"""fbgraph CLI - Main commands."""
import os
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ..core.exceptions import SDKError

ACCESS_TOKEN_ENV_NAME = 'FACEBOOK_ACCESS_TOKEN'

app = typer.Typer(
    name="fbgraph",
    help="Graph API command line client",
    add_completion=False
)
console = Console()


def get_api():
    """GraphAPI built from the FACEBOOK_* environment variables."""
    from fbgraph import GraphAPI

    try:
        return GraphAPI()
    except SDKError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


def resolve_token(token: Optional[str]) -> str:
    token = token or os.environ.get(ACCESS_TOKEN_ENV_NAME)
    if not token:
        console.print(f"[red]No access token. Pass --token or set {ACCESS_TOKEN_ENV_NAME}.[/red]")
        raise typer.Exit(1)
    return token


@app.command()
def get(
    endpoint: str = typer.Argument(..., help="Graph endpoint, e.g. /me?fields=id,name"),
    token: str = typer.Option(None, "--token", "-t", help="Access token"),
    edge: bool = typer.Option(False, "--edge", "-e", help="Decode the response as an edge"),
):
    """Send a GET request and print the decoded node or edge."""
    api = get_api()
    access_token = resolve_token(token)

    try:
        response = api.get(endpoint, access_token)
        result = response.get_graph_edge() if edge else response.get_graph_node()
    except SDKError as e:
        console.print(f"[red]Request failed: {e}[/red]")
        raise typer.Exit(1)

    console.print_json(result.as_json())


@app.command("upload-video")
def upload_video(
    target: str = typer.Argument(..., help="Id of the user, page, group or event (or 'me')"),
    file_path: Path = typer.Argument(..., help="Local video file", exists=True, dir_okay=False),
    title: str = typer.Option(None, "--title", help="Video title"),
    description: str = typer.Option(None, "--description", "-d", help="Video description"),
    max_tries: int = typer.Option(5, "--max-tries", min=1, help="Transfer attempts per chunk"),
    token: str = typer.Option(None, "--token", "-t", help="Access token"),
):
    """Upload a video with the resumable upload protocol."""
    api = get_api()
    access_token = resolve_token(token)

    metadata = {}
    if title:
        metadata['title'] = title
    if description:
        metadata['description'] = description

    with console.status(f"Uploading {file_path.name}..."):
        try:
            result = api.upload_video(target, file_path, metadata or None, access_token, max_tries)
        except SDKError as e:
            console.print(f"[red]Upload failed: {e}[/red]")
            raise typer.Exit(1)

    console.print(f"[green]Uploaded:[/green] {file_path.name}")
    console.print(f"Video ID: {result['video_id']}")
    console.print(f"Success: {result['success']}")


@app.command("debug-token")
def debug_token(
    input_token: str = typer.Argument(..., help="Token to inspect"),
):
    """Show the metadata Graph reports for a token."""
    api = get_api()

    try:
        metadata = api.get_oauth2_client().debug_token(input_token)
    except SDKError as e:
        console.print(f"[red]Token lookup failed: {e}[/red]")
        raise typer.Exit(1)

    table = Table(title="Access token")
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("App ID", str(metadata.get_app_id()))
    table.add_row("Application", str(metadata.get_application()))
    table.add_row("User ID", str(metadata.get_user_id()))
    table.add_row("Valid", str(metadata.get_is_valid()))
    table.add_row("Issued at", str(metadata.get_issued_at()))
    table.add_row("Expires at", str(metadata.get_expires_at()))
    table.add_row("Scopes", ", ".join(metadata.get_scopes() or []))
    if metadata.is_error():
        table.add_row("Error", f"[red]{metadata.get_error_message()}[/red]")

    console.print(table)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
