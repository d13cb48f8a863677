from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.looply.looply.common.datetime_utils import now_utc
from src.looply.looply.container import build_store
from src.looply.looply.database.seed import DEMO_OWNER_EMAIL, DEMO_OWNER_PASSWORD, seed_demo_company


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    store, _ = build_store(storage_backend="mysql", db_config=db_config)
    company = seed_demo_company(store, now_utc().date())

    print(
        f"OK: Seeded {company.name} -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')} "
        f"(sign in as {DEMO_OWNER_EMAIL} / {DEMO_OWNER_PASSWORD}, employees TEST1000..TEST1009)"
    )


if __name__ == "__main__":
    main()
