import io

import pytest

from taskbench.cli import INVALID_CHOICE, MENU, TASKS, main, run_task


def test_run_task_prints_output(capsys):
    run_task(9)
    assert capsys.readouterr().out.startswith("Топ-3 цвета:")


def test_run_unknown_task_raises():
    with pytest.raises(ValueError):
        run_task(42)
    with pytest.raises(ValueError):
        run_task(0)


def test_every_task_is_in_menu():
    for number, (title, _) in TASKS.items():
        assert f"{number}. {title}\n" in MENU
    assert "0. Выход" in MENU


def test_every_task_runs(capsys):
    for number in TASKS:
        run_task(number)
    assert "Итоговый словарь:" in capsys.readouterr().out


def test_interactive_menu(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("10\n0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Итоговый словарь:" in out
    assert out.count("Выберите задачу: ") == 2


def test_interactive_invalid_choice(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc 77\n0\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.count(INVALID_CHOICE) == 2


def test_interactive_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 0
    assert "Меню задач:" in capsys.readouterr().out


def test_tasks_from_arguments(capsys):
    assert main(["5", "99"]) == 0
    out = capsys.readouterr().out
    assert "Слитое расписание" in out
    assert INVALID_CHOICE in out