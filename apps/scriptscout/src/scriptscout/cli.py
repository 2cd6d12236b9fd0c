"""CLI for scriptscout."""

import logging

import click

from .exceptions import ScriptScoutError
from .models import User
from .service import GitHubScriptService
from .settings import Settings

logger = logging.getLogger(__name__)


def setup_logging(verbose: int) -> None:
    """Setup logging."""
    level = logging.DEBUG if verbose >= 2 else logging.INFO if verbose == 1 else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


@click.group()
@click.option("--storage-dir", "-s", help="User file storage root (default: $SCRIPTSCOUT_STORAGE_DIR)")
@click.option("-v", "--verbose", count=True, help="Verbosity (-v, -vv)")
@click.pass_context
def cli(ctx: click.Context, storage_dir: str | None, verbose: int) -> None:
    """Discover test scripts in users' GitHub repositories."""
    setup_logging(verbose)
    settings = Settings(storage_dir=storage_dir) if storage_dir else Settings()
    ctx.ensure_object(dict)
    ctx.obj["service"] = GitHubScriptService.from_settings(settings)


@cli.command()
@click.argument("user_id")
@click.pass_context
def configs(ctx, user_id):
    """List repository configs of a user."""
    service = ctx.obj["service"]
    try:
        repo_configs = service.get_github_configs(User(user_id=user_id))
    except ScriptScoutError as e:
        raise click.ClickException(e.message) from e

    if not repo_configs:
        click.echo("No repositories configured.")
        return
    for index, config in enumerate(repo_configs):
        endpoint = config.base_url or "github.com"
        auth = "token" if config.access_token else "anonymous"
        click.echo(f"[{index}] {config.full_name} ({endpoint}, {auth})")


@cli.command()
@click.argument("user_id")
@click.option("-i", "--index", type=int, default=0, show_default=True, help="Config index")
@click.pass_context
def scripts(ctx, user_id, index):
    """List test scripts of a user's configured repository."""
    service = ctx.obj["service"]
    user = User(user_id=user_id)
    try:
        repo_configs = service.get_github_configs(user)
        if not 0 <= index < len(repo_configs):
            raise click.ClickException(
                f"Config index {index} out of range ({len(repo_configs)} configured)"
            )
        found = service.get_scripts(user, repo_configs[index])
    except ScriptScoutError as e:
        raise click.ClickException(e.message) from e

    for path in found:
        click.echo(path)
    click.echo(f"\n{len(found)} scripts", err=True)


if __name__ == "__main__":
    cli()
