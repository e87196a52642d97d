import io

from ordercontainer.demo import main, run_demo


def _output():
    buffer = io.StringIO()
    run_demo(buffer)
    return buffer.getvalue()


def _lines():
    return _output().splitlines()


def _tokens_after(lines, heading_start):
    index = next(i for i, line in enumerate(lines) if line.startswith(heading_start))
    following = lines[index + 1]
    if following.startswith("    Current elements"):
        following = lines[index + 2]
    return following.split()


def test_starts_and_ends_with_banners():
    lines = _lines()
    assert lines[0] == "=== Container Demo ==="
    assert lines[-1] == "=== Demo Complete ==="


def test_initial_state_is_empty():
    lines = _lines()
    assert "   Size: 0" in lines
    assert "   Is empty: Yes" in lines


def test_sizes_follow_add_and_remove():
    lines = _lines()
    assert "   Size after adding: 5" in lines
    assert "   Size after removing 5: 3" in lines


def test_order_line_keeps_insertion_order_without_removed_values():
    lines = _lines()
    order = _tokens_after(lines, "12. Order")
    assert order == ["10", "20", "15"]
    assert "5" not in order


def test_ascending_and_descending_agree_with_order():
    lines = _lines()
    order = [int(t) for t in _tokens_after(lines, "12. Order")]
    ascending = [int(t) for t in _tokens_after(lines, "8. AscendingOrder")]
    descending = [int(t) for t in _tokens_after(lines, "9. DescendingOrder")]
    assert ascending == sorted(order)
    assert descending == ascending[::-1]


def test_reverse_is_order_reversed():
    lines = _lines()
    order = _tokens_after(lines, "12. Order")
    reverse = _tokens_after(lines, "11. ReverseOrder")
    assert reverse == order[::-1]


def test_side_cross_and_middle_out_are_permutations():
    lines = _lines()
    order = sorted(_tokens_after(lines, "12. Order"))
    assert sorted(_tokens_after(lines, "10. SideCrossOrder")) == order
    assert sorted(_tokens_after(lines, "13. MiddleOutOrder")) == order


def test_side_cross_starts_with_min_then_max():
    lines = _lines()
    values = [int(t) for t in _tokens_after(lines, "12. Order")]
    side = [int(t) for t in _tokens_after(lines, "10. SideCrossOrder")]
    assert side[0] == min(values)
    assert side[1] == max(values)


def test_char_ascending_line():
    lines = _lines()
    assert "    Char AscendingOrder:  A B M Y Z " in lines
    descending = next(l for l in lines if l.startswith("    Char DescendingOrder:"))
    assert descending.split(":", 1)[1].split() == ["Z", "Y", "M", "B", "A"]


def test_both_missing_removals_report_error():
    output = _output()
    assert output.count("Caught expected error: Element not found in container") == 2


def test_string_conversion_lines_end_with_space():
    lines = _lines()
    words = next(l for l in lines if l.startswith("   String container: "))
    assert words == "   String container: Hello World Demo "


def test_main_writes_same_output_and_returns_zero(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == _output()


def test_run_demo_defaults_to_stdout(capsys):
    run_demo()
    captured = capsys.readouterr()
    assert captured.out == _output()