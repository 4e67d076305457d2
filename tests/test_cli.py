import pytest

from bfstats.cli import main

TARGETS = "Workstations,1000\nOS,100\nMBDA,50\n"
REPORT = (
    "<html><body><table>\n"
    "<tr><td>Workstations</td><td>500</td><td>OS</td><td>40</td></tr>\n"
    "<tr><td>OS*</td><td>10</td><td>MBDA</td><td>7</td></tr>\n"
    "</table></body></html>\n"
)


def test_no_arguments_prints_usage(capsys):
    assert main([]) == 0
    assert "usage: bfstats" in capsys.readouterr().out


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["-V"])
    assert exc.value.code == 0
    assert "bfstats, version 1.0" in capsys.readouterr().out


def test_option_without_value_fails(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["-t", "targets.csv", "-c"])
    assert exc.value.code != 0
    assert "-c" in capsys.readouterr().err


def test_full_run_prints_table(write_file, capsys):
    targets = write_file("targets.csv", TARGETS)
    report = write_file("report.html", REPORT)
    assert main(["-t", str(targets), "-c", str(report)]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 4
    header, current, target, pct = lines
    assert header == "|| Nodes       || Workstations || OS*  || MBDA  || TOTAL || "
    assert current == "| *Current*    | 500           | 50    | 7      | 557    | "
    assert target == "| *Target*     | 1,000         | 100   | 7      | 1,107  | "
    assert pct == "| *% Comp*     | *50*          | *50*  | *100*  | *50*   | "


def test_missing_inputs_still_print_total(tmp_path, capsys):
    assert main(["-t", str(tmp_path / "t.csv"), "-c", str(tmp_path / "c.html")]) == 0
    captured = capsys.readouterr()
    assert captured.err.count("Could not open file") == 2
    assert "TOTAL" in captured.out
    assert "*0*" in captured.out


def test_out_writes_file(write_file, tmp_path, capsys):
    targets = write_file("targets.csv", TARGETS)
    report = write_file("report.html", REPORT)
    out = tmp_path / "wiki" / "table.txt"
    assert main(["-t", str(targets), "-c", str(report), "-o", str(out)]) == 0
    text = out.read_text(encoding="utf-8")
    assert text.startswith("|| Nodes")
    assert "Workstations" in text
    assert capsys.readouterr().out == ""
    assert not out.with_suffix(".txt.tmp").exists()


def test_help_shows_version_banner(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["-h"])
    assert exc.value.code == 0
    assert "bfstats, version 1.0" in capsys.readouterr().out


def test_names_with_extra_whitespace_still_match(write_file, capsys):
    targets = write_file("targets.csv", "Lab  Machines,10\n")
    report = write_file("report.html", "<tr><td>Lab  Machines</td><td>5</td></tr>\n")
    assert main(["-t", str(targets), "-c", str(report)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("|| Nodes       || Lab Machines ")
    assert lines[1].startswith("| *Current*    | 5 ")
    assert "*50*" in lines[3]
