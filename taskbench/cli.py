"""Menu that runs the individual task demonstrations."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterable, Iterator, Sequence

from taskbench import (
    analysis,
    battle,
    colors,
    config_diff,
    cycles,
    delivery,
    dictionaries,
    employees,
    schedule,
    social,
)

TASKS: dict[int, tuple[str, Callable[[], None]]] = {
    1: ("Группировка сотрудников", employees.demo),
    2: ("Доставка (жадный маршрут)", delivery.demo),
    3: ("Цепочка кратных", social.demo),
    4: ("Сравнение конфигураций", config_diff.demo),
    5: ("Слияние расписаний", schedule.demo),
    6: ("Анализ команд", analysis.demo),
    7: ("Поиск циклов в графе", cycles.demo),
    8: ("Битва команд", battle.demo),
    9: ("Доминирующие цвета", colors.demo),
    10: ("Объединение словарей", dictionaries.demo),
}

INVALID_CHOICE = "Некорректный выбор"

MENU = (
    "\nМеню задач:\n"
    + "".join(f"{number}. {title}\n" for number, (title, _) in TASKS.items())
    + "0. Выход\n"
    + "Выберите задачу: "
)


def run_task(choice: int) -> None:
    """Run the task with the given menu number; raise ValueError if unknown."""
    try:
        _, task = TASKS[choice]
    except (KeyError, TypeError):
        raise ValueError(f"unknown task: {choice!r}") from None
    task()


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _parse_choice(token: str) -> int | None:
    try:
        return int(token)
    except ValueError:
        return None


def _dispatch(choice: int | None) -> None:
    try:
        run_task(choice)
    except ValueError:
        print(INVALID_CHOICE)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the tasks named on the command line, or the interactive menu."""
    parser = argparse.ArgumentParser(
        prog="taskbench", description="Run small data-processing task demonstrations."
    )
    parser.add_argument("tasks", nargs="*", type=int, metavar="N", help="task numbers to run")
    args = parser.parse_args(argv)

    if args.tasks:
        for choice in args.tasks:
            if choice == 0:
                break
            _dispatch(choice)
        return 0

    tokens = _tokens(sys.stdin)
    while True:
        print(MENU, end="", flush=True)
        token = next(tokens, None)
        if token is None:
            print()
            return 0
        choice = _parse_choice(token)
        if choice == 0:
            return 0
        _dispatch(choice)


if __name__ == "__main__":
    sys.exit(main())