"""Example: drive the service layer directly (no Flask).

Controllers are thin; check-in rules and reporting live in the services.
"""

import importlib

from config import get_settings_module

from src.attendify.attendify.container import build_container
from src.attendify.attendify.reports.model import ReportPeriod


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(summarizer_config=settings.SUMMARIZER_CONFIG)

    print(container.attendance_service.mark_all_present("s1").message)
    print(container.attendance_service.simulate_gps_checkin("s3").message)
    print(container.report_service.stats("t1"))
    print(container.report_service.generate("t1", ReportPeriod.THIS_WEEK).report.summary)


if __name__ == "__main__":
    main()
