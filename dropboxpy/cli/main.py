"""Dropbox CLI - Main commands."""
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn

app = typer.Typer(
    name="dropbox",
    help="Dropbox web upload CLI",
    add_completion=False
)
console = Console()


def prompt_credentials(email: Optional[str], password: Optional[str]):
    """Ask for whatever credentials were not given."""
    if not email:
        email = typer.prompt("Email")
    if not password:
        password = typer.prompt("Password", hide_input=True)
    return email, password


@app.callback()
def main_options(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Dropbox web upload CLI."""
    from dropboxpy import setup_logging

    logging.basicConfig(format="%(asctime)s %(name)s %(levelname)s %(message)s")
    setup_logging(logging.DEBUG if verbose else logging.WARNING)


@app.command()
def login(
    email: str = typer.Option(None, "--email", "-e", envvar="DROPBOX_EMAIL", help="Dropbox email"),
    password: str = typer.Option(None, "--password", "-p", envvar="DROPBOX_PASSWORD", help="Dropbox password"),
    ca_path: Path = typer.Option(None, "--ca-path", help="Directory of CA certificates"),
):
    """Check that the credentials are accepted."""
    from dropboxpy import DropboxUploader, DropboxException

    email, password = prompt_credentials(email, password)

    with DropboxUploader(email, password, str(ca_path) if ca_path else None) as dropbox:
        try:
            dropbox.login()
        except DropboxException as e:
            console.print(f"[red]Login failed: {e}[/red]")
            raise typer.Exit(1)

    console.print(f"[green]Logged in as {email}[/green]")


@app.command()
def upload(
    files: List[Path] = typer.Argument(..., help="Local files to upload", exists=True, dir_okay=False),
    dest: str = typer.Option("/", "--dest", "-d", help="Destination folder path"),
    email: str = typer.Option(None, "--email", "-e", envvar="DROPBOX_EMAIL", help="Dropbox email"),
    password: str = typer.Option(None, "--password", "-p", envvar="DROPBOX_PASSWORD", help="Dropbox password"),
    ca_path: Path = typer.Option(None, "--ca-path", help="Directory of CA certificates"),
):
    """Upload files to a Dropbox folder."""
    from dropboxpy import DropboxUploader, DropboxException
    from dropboxpy.core.upload.models import UploadProgress

    email, password = prompt_credentials(email, password)

    with DropboxUploader(email, password, str(ca_path) if ca_path else None) as dropbox:
        for file_path in files:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                BarColumn(),
                TaskProgressColumn(),
                console=console
            ) as progress:
                task = progress.add_task(f"Uploading {file_path.name}", total=100)

                def on_progress(p: UploadProgress):
                    progress.update(task, completed=p.percentage)

                try:
                    dropbox.upload(str(file_path), dest, progress_callback=on_progress)
                except DropboxException as e:
                    console.print(f"[red]Upload failed: {e}[/red]")
                    raise typer.Exit(1)

            console.print(f"[green]Uploaded:[/green] {file_path.name} -> {dest}")


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
