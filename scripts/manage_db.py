"""Create or seed the MySQL database.

Usage: python scripts/manage_db.py init|seed|setup
  init   apply database/schema.sql
  seed   apply database/seed.sql and upsert the demo accounts
  setup  init, then seed
"""

from __future__ import annotations

import sys

from _bootstrap import REPO_ROOT, describe_db, load_settings

from src.shift_attendance.shift_attendance.database.bootstrap import (
    apply_schema,
    apply_seed_sql,
    ensure_demo_users,
    list_tables,
)

COMMANDS = ("init", "seed", "setup")


def main(argv: list[str]) -> int:
    if len(argv) != 1 or argv[0] not in COMMANDS:
        print(__doc__.strip())
        return 2

    settings = load_settings()
    db_config = dict(settings.DB_CONFIG)
    command = argv[0]

    if command in ("init", "setup"):
        apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
        print(f"OK: Applied schema.sql -> {describe_db(db_config)} (tables={len(list_tables(db_config))})")
    if command in ("seed", "setup"):
        apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
        ensure_demo_users(db_config)
        print(f"OK: Seeded database -> {describe_db(db_config)}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
