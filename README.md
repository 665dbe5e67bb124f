# taskbench

Ten small data-processing exercises. Each comes with its own sample data set and
a `demo()` function that runs it. A console menu runs any of them by number.

## Tasks

| #  | Module                   | Main functions                                   | What it does |
|----|--------------------------|--------------------------------------------------|--------------|
| 1  | `taskbench.employees`    | `group_by_department`, `format_departments`      | Groups `Employee` records into `Department`s. Departments are ordered by falling average salary, and members by falling salary then name. |
| 2  | `taskbench.delivery`     | `greedy_route`                                   | Visits `DeliveryPoint`s greedily by distance divided by priority, starting from `(0, 0)` by default. |
| 3  | `taskbench.social`       | `find_user`, `shortest_chain`, `max_common_friends` | Finds the shortest chain of friend ids between two `User`s by breadth-first search. Also finds the first pair of users with the most common friends. |
| 4  | `taskbench.config_diff`  | `diff_configs`                                   | Compares two trees of `ConfigEntry` by key. Returns a `ConfigDiff` holding the dotted paths that were added, removed and modified. |
| 5  | `taskbench.schedule`     | `merge_schedules`                                | Merges lists of `Event`s, ordered by day and hour. Only the highest-priority event is kept for each slot. |
| 6  | `taskbench.analysis`     | `analyze_responses`, `format_report`             | Computes `ReportStats` for each team and day: the share acknowledged and the mean and median delay of acknowledged requests. Groups smaller than `min_group_size` (default 3) are skipped. |
| 7  | `taskbench.cycles`       | `build_graph`, `find_cycles`                     | Finds cycles in a graph of `Dependency` edges by depth-first search. |
| 8  | `taskbench.battle`       | `simulate_battle`                                | Simulates a turn-based battle between teams of `Player`s. Each living player in turn hits the weakest living enemy. The result is a `BattleResult` with `winner`, `log` (a list of `LogEntry`), `players` and `damage_by_team(team)`. |
| 9  | `taskbench.colors`       | `top_colors`                                     | Returns the most frequent `RGB` colours with their counts, 3 by default. |
| 10 | `taskbench.dictionaries` | `merge_dicts`                                    | Merges dictionaries. Each key gets the upper median of its distinct values, and the keys that had conflicting values are returned as well. |

## Installation

```
pip install .
```

## Command line

```
taskbench
```

This opens a menu that reads from standard input. Enter a task number to run
that task on its sample data. Enter `0`, or end the input, to quit. An unknown
number prints `Некорректный выбор`.

You can also give task numbers as arguments. They run in order, and the menu
is not shown. A `0` among them stops the run.

```
taskbench 1 7 9
```

## Library use

```python
from taskbench.social import User, shortest_chain

users = [User(1, "Maxim", [2, 3]), User(2, "Vasya", [1, 3])]
print(shortest_chain(users, 2, 1))   # [2, 1]
```

```python
from taskbench.colors import RGB, top_colors

print(top_colors([RGB(255, 0, 0), RGB(255, 0, 0), RGB(0, 0, 255)], 1))
```

Channel values outside 0..255 make `RGB` raise `ValueError`.

`simulate_battle` raises `ValueError` when two teams are still alive but no
living player can deal damage.

To run a single task by number:

```python
from taskbench.cli import run_task

run_task(7)   # prints the cycles of the sample graph
```

`run_task` raises `ValueError` for an unknown number.

## Tests

```
pip install .[test]
pytest
```