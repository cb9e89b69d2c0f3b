"""Command-line interface for Core Sitemaps."""

import logging
import sys
from datetime import datetime

import click
from rich.console import Console
from rich.table import Table

from coresitemaps.config import DEFAULT_CONFIG_PATH, Config
from coresitemaps.models import Post, PostStatus, PostType
from coresitemaps.server import SitemapsContext
from coresitemaps.store import Store


console = Console()


def get_store() -> Store:
    """Get the configured store."""
    config = click.get_current_context().obj
    return config.create_store()


def get_context() -> SitemapsContext:
    """Get a sitemaps context on the configured store."""
    config = click.get_current_context().obj
    return config.create_context()


@click.group()
@click.version_option(package_name="core-sitemaps")
@click.option(
    "--config",
    "config_path",
    default=DEFAULT_CONFIG_PATH,
    envvar="CORE_SITEMAPS_CONFIG",
    help="Path to the JSON config file",
)
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
@click.pass_context
def main(ctx: click.Context, config_path: str, verbose: bool) -> None:
    """Core Sitemaps - sitemap providers for site content."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = Config.load(config_path)


# =============================================================================
# Post type commands
# =============================================================================


@main.group()
def types() -> None:
    """Manage post types."""
    pass


@types.command("add")
@click.argument("name")
@click.option("--label", default="", help="Display label")
@click.option("--private", "private", is_flag=True, help="Exclude from sitemaps")
@click.option("--hierarchical", is_flag=True, help="Posts can have parents")
def types_add(name: str, label: str, private: bool, hierarchical: bool) -> None:
    """Register a post type."""
    with get_store() as store:
        post_type = store.add_post_type(
            PostType(name=name, label=label, public=not private, hierarchical=hierarchical)
        )
        console.print(f"[green]Registered post type: {post_type.name} ({post_type.label})[/green]")


@types.command("list")
def types_list() -> None:
    """List post types."""
    with get_store() as store:
        table = Table(show_header=True)
        table.add_column("Name")
        table.add_column("Label")
        table.add_column("Public")
        table.add_column("Published", justify="right")

        for post_type in store.list_post_types().values():
            published = store.count_posts([post_type.name], [PostStatus.PUBLISH])
            public = "[green]yes[/green]" if post_type.public else "[dim]no[/dim]"
            table.add_row(post_type.name, post_type.label, public, str(published))

        console.print(table)


# =============================================================================
# Post commands
# =============================================================================


@main.group()
def posts() -> None:
    """Manage posts."""
    pass


@posts.command("add")
@click.argument("post_type")
@click.argument("slug")
@click.option("--title", default="", help="Post title")
@click.option(
    "--status",
    type=click.Choice([s.value for s in PostStatus]),
    default=PostStatus.PUBLISH.value,
    help="Publication status",
)
@click.option("--parent", "parent_id", type=int, default=None, help="Parent post ID")
def posts_add(post_type: str, slug: str, title: str, status: str, parent_id: int | None) -> None:
    """Add a post."""
    now = datetime.utcnow()
    post = Post(
        id=None,
        post_type=post_type,
        slug=slug,
        title=title or slug.replace("-", " ").title(),
        status=PostStatus(status),
        published_at=now,
        modified_at=now,
        parent_id=parent_id,
    )

    with get_store() as store:
        try:
            post = store.add_post(post)
        except ValueError as e:
            console.print(f"[red]Failed to add post: {e}[/red]")
            sys.exit(1)

        console.print(f"[green]Added {post.post_type} {post.id}: {post.title}[/green]")


@posts.command("list")
@click.option("--type", "post_type", default="post", help="Post type to list")
@click.option("--limit", default=20, help="Number of posts to show")
def posts_list(post_type: str, limit: int) -> None:
    """List posts of a type, newest first."""
    with get_store() as store:
        posts_found = store.query_posts(
            [post_type],
            list(PostStatus),
            orderby="date",
            order="DESC",
            limit=limit,
        )

        if not posts_found:
            console.print(f"[dim]No {post_type} posts. Use 'core-sitemaps posts add' to add one.[/dim]")
            return

        table = Table(show_header=True)
        table.add_column("ID", style="dim", justify="right")
        table.add_column("Slug")
        table.add_column("Title")
        table.add_column("Status")

        for post in posts_found:
            status_color = "green" if post.status == PostStatus.PUBLISH else "yellow"
            table.add_row(
                str(post.id),
                post.slug,
                post.title,
                f"[{status_color}]{post.status.value}[/{status_color}]",
            )

        console.print(table)


# =============================================================================
# Option commands
# =============================================================================


@main.group()
def options() -> None:
    """Read and write site options."""
    pass


@options.command("get")
@click.argument("key")
def options_get(key: str) -> None:
    """Show an option value."""
    with get_context() as context:
        value = context.site.get_option(key)
        if value is None:
            console.print(f"[dim]{key} is not set[/dim]")
            return
        console.print(value)


@options.command("set")
@click.argument("key")
@click.argument("value")
def options_set(key: str, value: str) -> None:
    """Set an option value."""
    with get_store() as store:
        store.set_option(key, value)
        console.print(f"[green]{key} = {value}[/green]")


# =============================================================================
# Sitemap commands
# =============================================================================


@main.group()
def sitemaps() -> None:
    """Inspect sitemaps."""
    pass


def _require_server(context: SitemapsContext):
    server = context.get_server()
    if not server:
        console.print("[yellow]Sitemaps are disabled for this site.[/yellow]")
        sys.exit(1)
    return server


@sitemaps.command("list")
def sitemaps_list() -> None:
    """List providers with their subtypes and page counts."""
    with get_context() as context:
        server = _require_server(context)

        table = Table(show_header=True)
        table.add_column("Provider")
        table.add_column("Subtype")
        table.add_column("Pages", justify="right")

        for name, provider in server.registry.get_sitemaps().items():
            for type_data in provider.get_sitemap_type_data():
                table.add_row(name, type_data["name"] or "-", str(type_data["pages"]))

        console.print(table)


@sitemaps.command("index")
def sitemaps_index() -> None:
    """Show the URL of every sitemap page."""
    with get_context() as context:
        server = _require_server(context)

        for provider in server.registry.get_sitemaps().values():
            for entry in provider.get_sitemap_entries():
                console.print(entry["loc"])


@sitemaps.command("urls")
@click.argument("provider_name")
@click.argument("subtype", default="")
@click.option("--page", default=1, help="Sitemap page number")
def sitemaps_urls(provider_name: str, subtype: str, page: int) -> None:
    """Show the entries on one sitemap page."""
    with get_context() as context:
        server = _require_server(context)

        provider = server.registry.get_provider(provider_name)
        if not provider:
            console.print(f"[red]Sitemap provider not found: {provider_name}[/red]")
            sys.exit(1)

        url_list = provider.get_url_list(page, subtype)
        if not url_list:
            console.print("[dim]No URLs on this page.[/dim]")
            return

        for entry in url_list:
            extra = " ".join(f"{k}={v}" for k, v in entry.items() if k != "loc")
            console.print(f"{entry['loc']} [dim]{extra}[/dim]" if extra else entry["loc"])


if __name__ == "__main__":
    main()
