"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; clocking, editing and wage applies live in the services.
"""

import importlib
from datetime import datetime, timedelta

from config import get_settings_module

from src.paycheck_pal.paycheck_pal.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(storage_config=settings.STORAGE_CONFIG)

    if container.settings_service.needs_setup():
        container.settings_service.update_wage(200)

    start = datetime.now().replace(hour=9, minute=0, second=0, microsecond=0)
    container.record_service.clock_in(now=start)
    container.record_service.clock_out(now=start + timedelta(hours=8, minutes=30))

    print(container.record_service.history_ui(limit=5))
    print(container.summary_service.for_offset(0))


if __name__ == "__main__":
    main()
