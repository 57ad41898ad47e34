"""Example: use the service layer without Flask.

Prints the attendance summary for one team and writes its roster report to
stdout as CSV.
"""

import importlib
import sys

from config import get_settings_module

from src.roster_system.roster_system.container import build_container
from src.roster_system.roster_system.reports.model import FilterState


def main(team_id: int = 1):
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    report = container.report_service.build_attendance_report(FilterState(team_id=team_id))
    stats = report.stats
    print(
        f"team={team_id} records={stats.total_records} present={stats.present_count} "
        f"absent={stats.absent_count} excused={stats.excused_count} rate={stats.attendance_rate:.1f}%"
    )
    sys.stdout.write(container.report_service.export_roster_csv(team_id))


if __name__ == "__main__":
    main(int(sys.argv[1]) if len(sys.argv) > 1 else 1)
