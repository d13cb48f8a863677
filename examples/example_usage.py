"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the reporting logic lives in the services.
"""

from src.looply.looply.common.datetime_utils import now_utc
from src.looply.looply.container import build_container
from src.looply.looply.database.seed import DEMO_COMPANY_ID, seed_demo_company


def main():
    container = build_container(storage_backend="memory")
    seed_demo_company(container.store, now_utc().date())

    stats = container.report_service.get_dashboard_stats(DEMO_COMPANY_ID)
    print(stats.to_dict())
    print(container.report_service.export_csv(DEMO_COMPANY_ID, start_date=now_utc().date()))


if __name__ == "__main__":
    main()
