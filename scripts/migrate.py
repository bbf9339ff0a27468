"""Apply, revert or generate Alembic migrations."""

import sys

from alembic import command
from alembic.config import Config

USAGE = "Usage: python scripts/migrate.py [upgrade | downgrade <revision> | create <message>]"


def upgrade(revision: str = "head") -> None:
    """Upgrade the schema to ``revision``."""
    print(f"Upgrading schema to {revision}...")
    command.upgrade(Config("alembic.ini"), revision)
    print("✓ Schema is up to date")


def downgrade(revision: str) -> None:
    """Revert the schema to ``revision``."""
    print(f"Downgrading schema to {revision}...")
    command.downgrade(Config("alembic.ini"), revision)
    print("✓ Downgrade complete")


def create_migration(message: str) -> None:
    """Autogenerate a migration from the table metadata."""
    print(f"Creating migration: {message}")
    command.revision(Config("alembic.ini"), message=message, autogenerate=True)
    print("✓ Migration created")


def main(argv: list[str]) -> int:
    """Dispatch a migration command."""
    try:
        if not argv or argv[0] == "upgrade":
            upgrade()
        elif argv[0] == "downgrade" and len(argv) == 2:
            downgrade(argv[1])
        elif argv[0] == "create" and len(argv) > 1:
            create_migration(" ".join(argv[1:]))
        else:
            print(USAGE)
            return 2
    except Exception as e:
        print(f"✗ Migration command failed: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
