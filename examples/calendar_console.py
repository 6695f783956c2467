"""Example: drive the calendar view from a terminal (no Flask).

Commands: n (next month), p (previous), t (today), a day number to add an event, q to quit.
"""

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.employee_portal.employee_portal.calendar.view import CalendarView, event_prompt_text


def ask(day_date):
    return input(event_prompt_text(day_date) + " ").strip() or None


def show(view: CalendarView) -> None:
    print(f"\n{view.grid.label:^28}")
    print(" Su  Mo  Tu  We  Th  Fr  Sa")
    for row in view.grid.rows:
        line = ""
        for cell in row:
            if cell is None:
                line += "    "
                continue
            mark = "*" if cell.is_today else ("!" if cell.has_event else ("h" if cell.is_holiday else " "))
            line += f"{cell.day:>3}{mark}"
        print(line)
    for cell in view.grid.day_cells:
        if cell.title:
            print(f"  {cell.day:>2}: {cell.title}")


def main() -> None:
    view = CalendarView(prompt=ask)
    show(view)
    while True:
        cmd = input("\n[n/p/t/<day>/q] > ").strip().lower()
        if cmd == "q":
            break
        if cmd == "n":
            view.navigate(1)
        elif cmd == "p":
            view.navigate(-1)
        elif cmd == "t":
            view.go_to_today()
        elif cmd.isdigit() and view.grid.cell(int(cmd)):
            view.on_cell_activate(int(cmd))
        show(view)


if __name__ == "__main__":
    main()
