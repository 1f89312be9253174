"""Example: use the service layer directly (no Flask).

Prints this week's status row for one user in one organization.
"""

import importlib
import sys

from config import get_settings_module

from src.week_status.week_status.container import build_container


def main():
    user_id, org_id = sys.argv[1], sys.argv[2]
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=settings.DB_CONFIG,
        week_days=settings.WEEK_DAYS,
        week_starts_on=settings.WEEK_STARTS_ON,
    )
    overview = container.week_status_service.get_week(user_id=user_id, org_id=org_id)
    for row in overview.days:
        print(row["date"], row["weekday"], row["status"])
    print(overview.summary)


if __name__ == "__main__":
    main()
