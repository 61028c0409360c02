from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.payroll_desk.payroll_desk.database.bootstrap import apply_seed_sql, ensure_demo_owner
from src.payroll_desk.payroll_desk.database.connection import DBConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
    ensure_demo_owner(db_config, email=settings.SEED_OWNER_EMAIL, password=settings.SEED_OWNER_PASSWORD)

    print(f"OK: Seeded database -> {DBConfig.from_dict(db_config).describe()} (owner={settings.SEED_OWNER_EMAIL})")


if __name__ == "__main__":
    main()
