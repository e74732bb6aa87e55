from abtree.__main__ import main
from config import Config


def test_main_runs_demo_keys(capsys):
    assert main([]) == 0
    output = capsys.readouterr().out

    assert output.count("Inserting: ") == len(Config.demo_keys)
    assert "Final tree:" in output
    for key in Config.demo_keys:
        assert f"Inserting: {key}\n" in output
    assert output.endswith(
        "Final tree:\n"
        "Internal: [10]\n"
        "  Internal: [6]\n"
        "    Leaf: [3, 5]\n"
        "    Leaf: [7]\n"
        "  Internal: [20]\n"
        "    Leaf: [12, 17]\n"
        "    Leaf: [22, 25, 30]\n"
    )


def test_main_with_keys_and_removals(capsys):
    assert main(["1", "2", "3", "4", "--remove", "2", "--remove", "9"]) == 0
    output = capsys.readouterr().out

    assert "Removing: 2 (removed)" in output
    assert "Removing: 9 (not found)" in output
    assert output.endswith("Final tree:\nInternal: [3]\n  Leaf: [1]\n  Leaf: [4]\n")


def test_main_custom_order(capsys):
    assert main(["--a", "3", "--b", "6"] + [str(k) for k in range(1, 7)]) == 0
    output = capsys.readouterr().out
    assert output.endswith("Final tree:\nInternal: [3]\n  Leaf: [1, 2]\n  Leaf: [4, 5, 6]\n")


def test_main_invalid_parameters(capsys):
    assert main(["--a", "3", "--b", "5"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error: Require 2 <= a <= b/2" in captured.err
