import pytest

from fixed8.cli import main


def _run(capsys, *argv):
    assert main(list(argv)) == 0
    return capsys.readouterr().out.splitlines()


def test_default_runs_bsp(capsys):
    default = _run(capsys)
    explicit = _run(capsys, "bsp")
    assert default == explicit
    assert len(default) == 11


def test_bsp_output(capsys):
    lines = _run(capsys, "bsp")
    assert lines[0] == "Test (1,1) : 1"
    assert lines[1] == "Test (3,2) : 1"
    assert lines[8] == "Test (10,10) : 0"
    assert all(line.endswith(" : 0") for line in lines[2:])


def test_raw_demo(capsys):
    lines = _run(capsys, "raw")
    assert lines[:4] == [
        "Constructor call",
        "Copy constructor call",
        "Constructor call",
        "Copy assign operation call",
    ]
    assert lines[4:10] == ["getRawBits call", "0"] * 3
    assert lines[10:] == ["Destructor call"] * 3


def test_convert_demo(capsys):
    lines = _run(capsys, "convert")
    assert "a is 1234.43" in lines
    assert "b is 10" in lines
    assert "d is 10" in lines
    assert "c is 42 as integer" in lines
    assert "a is 1234 as integer" in lines
    assert lines[-4:] == ["Destructor called"] * 4


def test_convert_balances_lifecycle(capsys):
    lines = _run(capsys, "convert")
    created = sum(line.endswith("constructor called") for line in lines)
    destroyed = lines.count("Destructor called")
    assert created == destroyed


def test_arithmetic_demo(capsys):
    lines = _run(capsys, "arithmetic")
    values = [line for line in lines if not line.endswith("called")]
    assert values[0] == "0"
    assert values[1] == values[2] == values[3]
    assert values[5] == "10.1016"
    assert values[6] == values[5]
    assert values[7] == values[4]


def test_arithmetic_balances_lifecycle(capsys):
    lines = _run(capsys, "arithmetic")
    created = sum(line.endswith("constructor called") for line in lines)
    assert created == lines.count("Destructor called")


def test_unknown_demo_is_rejected(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["nonsense"])
    assert excinfo.value.code == 2