"""Example: use the calendar service directly (no Flask).

Builds a small seeded roster, picks the first driver and prints this
month's grid with one status per day.
"""

from datetime import date

from src.attendance_calendar.attendance_calendar.attendance.generator import AttendanceRecordGenerator
from src.attendance_calendar.attendance_calendar.attendance.json_roster_repository import GeneratedRosterRepository
from src.attendance_calendar.attendance_calendar.attendance.service import AttendanceCalendarService


class SmallRoster(GeneratedRosterRepository):
    def load(self):
        return self._generator.generate_roster(drivers=3, emts=3)


def main():
    generator = AttendanceRecordGenerator(seed=7, window_start=date.today().replace(day=1))
    svc = AttendanceCalendarService(SmallRoster(generator))
    svc.reload()

    first = svc.employees()[0]
    svc.select_employee(first.employee_id)
    view = svc.current_month_ui()

    print(f"{view['employee']['name']} - {view['month_name']} {view['year']}")
    for week in view["weeks"]:
        print(" ".join((c["status"] or "-")[:7].ljust(7) for c in week))


if __name__ == "__main__":
    main()
