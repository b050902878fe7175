import pytest

from leetkit.demo import DEMOS, main, run_demo


def test_stock_demo_output():
    assert run_demo("best-time-to-buy-and-sell-stock") == (
        "Input vector: 7 1 5 3 6 4 \nOutput: 5\n"
    )


def test_two_sum_demo_reports_pair():
    text = run_demo("two-sum")
    assert "Target: 9\n" in text
    assert "Indices of the two numbers are: [0, 1]\n" in text


def test_boolean_demos_print_one():
    for name in ("balanced-binary-tree", "valid-anagram", "valid-palindrome", "valid-parenthesis"):
        assert run_demo(name).endswith("Output: 1\n")


def test_flood_fill_demo_shows_input_before_change():
    lines = run_demo("flood-fill").splitlines()
    assert lines[0] == "Input: "
    assert lines[1] == "1 1 1 "
    assert lines[4] == "Output: "


def test_merge_demo_ends_with_lists():
    lines = run_demo("merge-two-sorted-lists").splitlines()
    assert lines[1] == "1 -> 2 -> 4 -> nullptr"
    assert lines[3] == "1 -> 3 -> 4 -> nullptr"
    assert lines[-2] == "Output List"


def test_invert_demo_has_headings():
    lines = run_demo("invert-binary-tree").splitlines()
    assert lines[0] == "Input tree (level-order traversal):"
    assert lines[2] == "Inverted tree (level-order traversal):"
    assert lines[1].split(", ")[0] == lines[3].split(", ")[0]


def test_unknown_demo_raises():
    with pytest.raises(ValueError):
        run_demo("no-such-demo")


def test_main_runs_named_demo(capsys):
    assert main(["valid-parenthesis"]) == 0
    assert capsys.readouterr().out == run_demo("valid-parenthesis")


def test_main_runs_all_by_default(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == "".join(run_demo(name) for name in DEMOS)


def test_main_lists_names(capsys):
    assert main(["--list"]) == 0
    assert capsys.readouterr().out.split() == list(DEMOS)


def test_main_rejects_unknown_name():
    with pytest.raises(SystemExit) as excinfo:
        main(["bogus"])
    assert excinfo.value.code == 2