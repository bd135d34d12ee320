"""CLI entrypoints for bkmtree."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from bkmtree.bkm import export_bookmarks, parse_bookmarks, parse_bookmarks_file
from bkmtree.bkm.reader import bookmarks_path_for
from bkmtree.config import Settings, load_settings
from bkmtree.errors import BookmarksError
from bkmtree.logging import configure_logging, get_logger
from bkmtree.models import OutlineNode, OutlineSet, OutlineTree

app = typer.Typer(add_completion=False, help="Alternate bookmarks (.bkm) tools")
logger = get_logger(__name__)
console = Console()


def _resolve(path: Path, settings: Settings) -> Path:
    """Accept either the .bkm file itself or the document it belongs to."""

    if path.name.endswith(settings.bookmarks_suffix):
        return path
    return bookmarks_path_for(path, settings.bookmarks_suffix)


def _label(node: OutlineNode) -> str:
    label = escape(node.title)
    if node.is_bold:
        label = f"[bold]{label}[/bold]"
    if node.is_italic:
        label = f"[italic]{label}[/italic]"
    if node.color is not None:
        c = node.color
        label = f"[#{c.r:02x}{c.g:02x}{c.b:02x}]{label}[/]"
    if node.page_no is not None:
        label += f" [dim]p.{node.page_no}[/dim]"
    return label


def render_tree(tree: OutlineTree) -> Tree:
    """Build a rich tree for `tree`, children nested under their parent."""

    view = Tree(f"[bold]{tree.name}[/bold] [dim]({tree.source_path})[/dim]")
    branches: list[Tree] = [view]
    for depth, node in tree.walk():
        del branches[depth + 1 :]
        branches.append(branches[depth].add(_label(node)))
    return view


@app.command()
def show(path: Path = typer.Argument(..., help=".bkm file or the document it belongs to")) -> None:
    """Print the alternate outline as a tree."""

    settings = load_settings()
    configure_logging(settings.log_level)

    bookmarks = OutlineSet()
    if not parse_bookmarks_file(_resolve(path, settings), bookmarks, encoding=settings.encoding):
        typer.secho("No valid alternate bookmarks", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    for tree in bookmarks.trees:
        console.print(render_tree(tree))


@app.command()
def check(path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True)) -> None:
    """Validate a .bkm file and report the first error."""

    settings = load_settings()
    configure_logging(settings.log_level)

    try:
        tree = parse_bookmarks(path.read_bytes().decode(settings.encoding))
    except UnicodeDecodeError as e:
        typer.secho(f"{path}: not valid {settings.encoding}: {e}", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    except BookmarksError as e:
        typer.secho(f"{path}: {type(e).__name__}: {e}", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    typer.secho(f"{path}: OK, {tree.count()} bookmarks", fg=typer.colors.GREEN)


@app.command()
def normalize(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output file (default: rewrite in place)"),
) -> None:
    """Rewrite a .bkm file in canonical form."""

    settings = load_settings()
    configure_logging(settings.log_level)

    bookmarks = OutlineSet()
    if not parse_bookmarks_file(path, bookmarks, encoding=settings.encoding):
        typer.secho(f"{path}: not a valid bookmarks file", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    target = output or path
    if not export_bookmarks(bookmarks, target, encoding=settings.encoding):
        typer.secho(f"{target}: write failed", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    logger.info("CLI normalize wrote %s", target)
    typer.echo(str(target))


if __name__ == "__main__":
    app()
