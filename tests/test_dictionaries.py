from taskbench.dictionaries import SAMPLE_DICTS, merge_dicts


def test_sample_merge():
    merged, conflicts = merge_dicts(SAMPLE_DICTS)
    assert merged == {"a": 7, "b": 8, "c": 5, "d": 1}
    assert conflicts == ["a", "b"]


def test_empty_input():
    assert merge_dicts([]) == ({}, [])


def test_equal_values_are_not_conflicts():
    merged, conflicts = merge_dicts([{"k": 4}, {"k": 4}])
    assert merged == {"k": 4}
    assert conflicts == []


def test_odd_number_of_values_picks_middle():
    merged, conflicts = merge_dicts([{"k": 1}, {"k": 5}, {"k": 3}])
    assert merged["k"] == 3
    assert conflicts == ["k"]


def test_even_number_of_values_picks_upper_middle():
    merged, _ = merge_dicts([{"k": 4}, {"k": 1}, {"k": 3}, {"k": 2}])
    assert merged["k"] == 3


def test_keys_sorted_and_values_come_from_input():
    dicts = [{"z": 1, "m": 9}, {"a": 2, "m": 9}]
    merged, _ = merge_dicts(dicts)
    assert list(merged) == ["a", "m", "z"]
    for key, value in merged.items():
        assert any(d.get(key) == value for d in dicts)