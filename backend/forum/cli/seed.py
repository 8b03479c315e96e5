"""``flask seed`` commands for populating a local forum database."""

from __future__ import annotations

import logging

import click
from flask import current_app
from flask.cli import with_appcontext
from sqlalchemy.exc import SQLAlchemyError

from forum.core.extensions import db, get_password_hasher
from forum.seeds import seed_data

LOGGER = logging.getLogger(__name__)

SEED_ENVIRONMENTS = frozenset({"development", "testing"})


def _refuse_outside_development() -> None:
    app_env = str(current_app.config.get("APP_ENV", "production")).lower()
    if app_env not in SEED_ENVIRONMENTS:
        raise click.UsageError(
            f"'flask seed' is restricted to development (APP_ENV={app_env!r})."
        )


@click.group("seed")
@click.option("--verbose", is_flag=True, help="Log every fixture as it is written.")
@click.pass_context
def seed_cli(ctx: click.Context, verbose: bool) -> None:
    """Seed a development database with demo content."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    level = logging.DEBUG if verbose else logging.INFO
    for name in (__name__, seed_data.__name__):
        logging.getLogger(name).setLevel(level)


@seed_cli.command("demo")
@click.pass_context
@with_appcontext
def demo_command(ctx: click.Context) -> None:
    """Create the demo users, posts and replies; safe to run repeatedly."""
    _refuse_outside_development()
    try:
        summary = seed_data.seed_demo(
            db, get_password_hasher(), verbose=bool(ctx.obj.get("verbose"))
        )
    except SQLAlchemyError as exc:
        db.session.rollback()
        LOGGER.error("seed.failed", exc_info=True)
        raise click.ClickException(f"Seeding failed: {exc}") from exc

    for table, counters in summary.items():
        click.echo(
            f"{table}: {counters.get('created', 0)} created, "
            f"{counters.get('existing', 0)} existing"
        )
