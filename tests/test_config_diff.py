from taskbench.config_diff import ConfigDiff, ConfigEntry, demo, diff_configs

OLD = [
    ConfigEntry("root", "", [
        ConfigEntry("section1", "", [
            ConfigEntry("key1", "val1"),
            ConfigEntry("key2", "val2"),
        ]),
        ConfigEntry("section2", "", [ConfigEntry("key3", "val3")]),
    ])
]

NEW = [
    ConfigEntry("root", "", [
        ConfigEntry("section1", "", [
            ConfigEntry("key1", "val1"),
            ConfigEntry("key2", "val2_changed"),
            ConfigEntry("key4", "val4"),
        ]),
        ConfigEntry("section3", "", [ConfigEntry("key5", "val5")]),
    ])
]


def test_sample_diff():
    diff = diff_configs(OLD, NEW, "root")
    assert diff.added == {"root.root.section1.key4", "root.root.section3"}
    assert diff.removed == {"root.root.section2"}
    assert diff.modified == {"root.root.section1.key2"}


def test_default_path_is_root():
    assert diff_configs(OLD, NEW) == diff_configs(OLD, NEW, "root")


def test_identical_configs_have_no_changes():
    assert diff_configs(OLD, OLD) == ConfigDiff()


def test_added_and_removed_are_disjoint():
    diff = diff_configs(OLD, NEW)
    assert diff.added.isdisjoint(diff.removed)


def test_swapping_sides_swaps_added_and_removed():
    forward = diff_configs(OLD, NEW)
    backward = diff_configs(NEW, OLD)
    assert forward.added == backward.removed
    assert forward.removed == backward.added
    assert forward.modified == backward.modified


def test_custom_path_prefix():
    assert diff_configs([], [ConfigEntry("k", "v")], "cfg").added == {"cfg.k"}


def test_removed_subtree_reports_only_its_root():
    old = [ConfigEntry("a", "", [ConfigEntry("b", "x")])]
    diff = diff_configs(old, [], "p")
    assert diff.removed == {"p.a"}
    assert diff.added == frozenset()


def test_value_change_and_nested_change():
    old = [ConfigEntry("s", "x", [ConfigEntry("k", "v1")])]
    new = [ConfigEntry("s", "y", [ConfigEntry("k", "v2")])]
    assert diff_configs(old, new, "p").modified == {"p.s", "p.s.k"}


def test_duplicate_keys_last_one_wins():
    old = [ConfigEntry("k", "v1"), ConfigEntry("k", "v2")]
    new = [ConfigEntry("k", "v2")]
    assert diff_configs(old, new, "p") == ConfigDiff()


def test_demo_output(capsys):
    demo()
    lines = capsys.readouterr().out.splitlines()
    diff = diff_configs(OLD, NEW, "root")
    assert lines == [
        "Добавленные: " + "".join(f"{p} " for p in sorted(diff.added)),
        "Удалённые: " + "".join(f"{p} " for p in sorted(diff.removed)),
        "Изменённые: " + "".join(f"{p} " for p in sorted(diff.modified)),
    ]