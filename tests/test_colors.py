from collections import Counter

import pytest

from taskbench.colors import RGB, SAMPLE_PIXELS, demo, top_colors


def test_sample_top_colors():
    assert top_colors(SAMPLE_PIXELS) == [
        (RGB(0, 0, 255), 4),
        (RGB(0, 255, 0), 3),
        (RGB(255, 0, 0), 3),
    ]


def test_count_limits_result():
    pixels = [RGB(1, 1, 1), RGB(2, 2, 2), RGB(3, 3, 3), RGB(1, 1, 1)]
    assert len(top_colors(pixels, 2)) == 2
    assert top_colors(pixels, 1)[0][0] == RGB(1, 1, 1)


def test_large_count_covers_all_pixels():
    result = top_colors(SAMPLE_PIXELS, 100)
    assert len(result) == len(set(SAMPLE_PIXELS))
    assert sum(n for _, n in result) == len(SAMPLE_PIXELS)
    assert dict(result) == Counter(SAMPLE_PIXELS)


def test_frequencies_do_not_increase():
    result = top_colors(SAMPLE_PIXELS, 10)
    counts = [n for _, n in result]
    assert counts == sorted(counts, reverse=True)


def test_empty_pixels():
    assert top_colors([]) == []


def test_negative_count_raises():
    with pytest.raises(ValueError):
        top_colors(SAMPLE_PIXELS, -1)


def test_channel_out_of_range_raises():
    with pytest.raises(ValueError):
        RGB(256, 0, 0)
    with pytest.raises(ValueError):
        RGB(0, -1, 0)


def test_str_and_demo(capsys):
    assert str(RGB(255, 0, 0)) == "RGB(255,0,0)"
    demo()
    out = capsys.readouterr().out
    assert out.startswith("Топ-3 цвета:\n")
    assert "RGB(0,0,255): 4" in out