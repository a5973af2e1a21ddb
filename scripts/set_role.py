"""Assign a role to an existing profile (e.g. promote the first admin).

Usage: python scripts/set_role.py <uid> <tanod|admin|pending>
"""

from __future__ import annotations

import argparse
import importlib

from dotenv import load_dotenv

from tanod_monitoring.config import get_settings_module
from tanod_monitoring.core.enums import Role
from tanod_monitoring.database.connection import DBConfig, DatabaseConnection
from tanod_monitoring.database.mysql_base import db_cursor


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("uid")
    parser.add_argument("role", choices=[r.value for r in Role])
    args = parser.parse_args()

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    conn = DatabaseConnection(DBConfig.from_dict(dict(settings.DB_CONFIG)))

    with db_cursor(conn) as (_, cur):
        cur.execute("UPDATE users SET role=%s WHERE uid=%s", (args.role, args.uid))
        updated = cur.rowcount

    if not updated:
        raise SystemExit(f"No profile for uid={args.uid!r}; the user must sign in once first.")
    print(f"OK: {args.uid} -> {args.role}")


if __name__ == "__main__":
    main()
