# Check the Supabase reservations table
from __future__ import annotations
import argparse
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import toml

from fuego_core.config import load_settings
from fuego_core.data.supabase_client import (
    SCHEMA_SQL,
    SupabaseReservationClient,
    get_supabase_client,
)
from fuego_core.errors import RemoteUnavailableError
from fuego_core.logging import setup_logging


def main() -> int:
    parser = argparse.ArgumentParser(description="Check the Supabase reservations table")
    parser.add_argument(
        "--secrets",
        default=str(project_root / ".streamlit" / "secrets.toml"),
        help="Path to secrets.toml (environment variables are used when missing)",
    )
    args = parser.parse_args()

    setup_logging(log_to_file=False)

    secrets_path = Path(args.secrets)
    secrets = toml.load(secrets_path) if secrets_path.exists() else {}
    settings = load_settings(secrets)

    remote = SupabaseReservationClient(
        get_supabase_client(settings),
        table_name=settings.table_name,
    )

    print(f"\n{'='*60}")
    print(f"Table: {settings.table_name}")
    print(f"{'='*60}")
    try:
        count = remote.count_reservations()
    except RemoteUnavailableError as e:
        print(f"  Error: {e}")
        if e.schema_missing:
            print("\nThe table does not exist. Run this in the Supabase SQL Editor:\n")
            print(SCHEMA_SQL)
        return 1

    print(f"  OK - {count} reservations")
    return 0


if __name__ == "__main__":
    sys.exit(main())
