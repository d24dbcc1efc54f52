#!/usr/bin/env python3
"""Bring the Reef account schema up to date.

Usage: ``run_migrations.py [revision]`` (default ``head``). The repository's
own ``alembic.ini`` is used whatever the working directory is, and failures
are reported to Logfire before the process exits non-zero.
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config
from alembic.script import ScriptDirectory

from reef.config import Settings
from reef.util.observability import configure_logfire

ROOT = Path(__file__).resolve().parent.parent


def alembic_config() -> Config:
    """Alembic config for this repository, independent of the working directory."""
    config = Config(str(ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(ROOT / "migrations"))
    return config


def head_revision(config: Config) -> str | None:
    """Return the newest revision of the account schema."""
    return ScriptDirectory.from_config(config).get_current_head()


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    target = args[0] if args else "head"

    settings = Settings()
    configure_logfire(settings)

    config = alembic_config()
    head = head_revision(config)

    with logfire.span(
        "migrations.upgrade", target=target, head=head, environment=settings.environment
    ):
        try:
            command.upgrade(config, target)
        except Exception as e:
            logfire.error(
                "Account schema migration failed",
                target=target,
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The API must not start against a half-migrated schema
            raise

    logfire.info("Account schema at {revision}", revision=target if target != "head" else head)
    return 0


if __name__ == "__main__":
    sys.exit(main())
