import pytest

from eposkit.clib import Rand
from eposkit.demo import BOUNDARY_COLOR, LEFT_TASK, RIGHT_TASK, main, run_demo
from eposkit.graphics import rgb
from eposkit.visual import create_array


def _pixel(device, x, y):
    index = y * device.bytes_per_scan_line + x * 3
    b, g, r = device.memory[index:index + 3]
    return rgb(r, g, b)


@pytest.fixture(scope="module")
def result():
    return run_demo(size=5, seed=7, delay=0)


def test_both_copies_sorted(result):
    assert result.right == sorted(result.original)
    assert result.left == sorted(result.original)


def test_original_comes_from_seed(result):
    assert result.original == create_array(5, Rand(7))


def test_boundaries_drawn(result):
    assert _pixel(result.device, 0, 0) == BOUNDARY_COLOR
    assert _pixel(result.device, 395, 300) == BOUNDARY_COLOR


def test_priorities_initialised(result):
    assert result.priorities == {RIGHT_TASK: 20, LEFT_TASK: 20}


def test_main_prints_sorted(capsys):
    assert main(["--size", "4", "--seed", "3", "--delay", "0"]) == 0
    lines = capsys.readouterr().out.splitlines()
    original = [int(v) for v in lines[0].split()[1:]]
    assert original == create_array(4, Rand(3))
    assert lines[1] == "right: " + " ".join(map(str, sorted(original)))
    assert lines[2] == "left: " + " ".join(map(str, sorted(original)))


def test_main_rejects_negative_size():
    with pytest.raises(SystemExit):
        main(["--size", "-1"])