"""Compare two configuration trees by key."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence


@dataclass
class ConfigEntry:
    """A configuration node with a value and child nodes."""

    key: str
    value: str = ""
    children: list[ConfigEntry] = field(default_factory=list)


@dataclass(frozen=True)
class ConfigDiff:
    """Dotted paths of added, removed and modified entries."""

    added: frozenset[str] = frozenset()
    removed: frozenset[str] = frozenset()
    modified: frozenset[str] = frozenset()


SAMPLE_OLD = [
    ConfigEntry("root", "", [
        ConfigEntry("section1", "", [
            ConfigEntry("key1", "val1"),
            ConfigEntry("key2", "val2"),
        ]),
        ConfigEntry("section2", "", [
            ConfigEntry("key3", "val3"),
        ]),
    ])
]

SAMPLE_NEW = [
    ConfigEntry("root", "", [
        ConfigEntry("section1", "", [
            ConfigEntry("key1", "val1"),
            ConfigEntry("key2", "val2_changed"),
            ConfigEntry("key4", "val4"),
        ]),
        ConfigEntry("section3", "", [
            ConfigEntry("key5", "val5"),
        ]),
    ])
]


def _changes(
    old: Sequence[ConfigEntry], new: Sequence[ConfigEntry], path: str
) -> Iterator[tuple[str, str]]:
    old_map = {entry.key: entry for entry in old}
    new_map = {entry.key: entry for entry in new}

    for key in new_map.keys() - old_map.keys():
        yield "added", f"{path}.{key}"
    for key in old_map.keys() - new_map.keys():
        yield "removed", f"{path}.{key}"
    for key, entry in new_map.items():
        previous = old_map.get(key)
        if previous is None:
            continue
        child_path = f"{path}.{key}"
        if previous.value != entry.value:
            yield "modified", child_path
        yield from _changes(previous.children, entry.children, child_path)


def diff_configs(
    old: Sequence[ConfigEntry], new: Sequence[ConfigEntry], path: str = "root"
) -> ConfigDiff:
    """Compare two lists of entries, naming changes by dotted paths under path.

    Entries are matched by key; with duplicate keys the last one counts.
    """
    found: dict[str, set[str]] = {"added": set(), "removed": set(), "modified": set()}
    for kind, changed_path in _changes(old, new, path):
        found[kind].add(changed_path)
    return ConfigDiff(
        added=frozenset(found["added"]),
        removed=frozenset(found["removed"]),
        modified=frozenset(found["modified"]),
    )


def demo() -> None:
    """Print the differences between the two sample configurations."""
    diff = diff_configs(SAMPLE_OLD, SAMPLE_NEW, "root")
    for label, paths in (
        ("Добавленные", diff.added),
        ("Удалённые", diff.removed),
        ("Изменённые", diff.modified),
    ):
        print(f"{label}: " + "".join(f"{p} " for p in sorted(paths)))