import io
import sys

from primer.dup import count_lines, count_text, duplicates, main


def test_count_lines_strips_terminators():
    counts = count_lines(io.StringIO("a\r\nb\na\n"))
    assert counts["a"] == 2
    assert counts["b"] == 1
    assert "" not in counts


def test_count_lines_last_line_without_newline():
    counts = count_lines(io.StringIO("x\nx"))
    assert counts["x"] == 2
    assert sum(counts.values()) == 2


def test_count_text_keeps_trailing_piece():
    counts = count_text("x\ny\nx\n")
    assert counts["x"] == 2
    assert counts[""] == 1
    assert sum(counts.values()) == len("x\ny\nx\n".split("\n"))


def test_duplicates_filters_and_keeps_order():
    counts = count_text("b\na\nb\nc\na\nb")
    assert duplicates(counts) == [("b", 3), ("a", 2)]


def test_duplicates_empty_when_all_unique():
    assert duplicates(count_text("one\ntwo\nthree")) == []


def test_main_reads_files(tmp_path, capsys):
    first = tmp_path / "one.txt"
    second = tmp_path / "two.txt"
    first.write_text("hello\nworld\n", encoding="utf-8")
    second.write_text("hello\n", encoding="utf-8")
    assert main([str(first), str(second)]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ["2\thello"]


def test_main_reports_missing_file_and_continues(tmp_path, capsys):
    good = tmp_path / "good.txt"
    good.write_text("z\nz\n", encoding="utf-8")
    missing = tmp_path / "missing.txt"
    main([str(missing), str(good)])
    captured = capsys.readouterr()
    assert captured.err.startswith("dup2: ")
    assert str(missing) in captured.err
    assert captured.out.splitlines() == ["2\tz"]


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("q\nr\nq\nq\n"))
    main([])
    assert capsys.readouterr().out.splitlines() == ["3\tq"]