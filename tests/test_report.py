import io

from probetable.report import print_full, print_nonempty, print_stats
from probetable.table import Method, ProbingTable


def collided_table() -> ProbingTable:
    t = ProbingTable(5, Method.LINEAR_PROBING)
    t.insert("a")
    t.insert("f")
    t.insert("a")
    return t


def test_print_nonempty():
    out = io.StringIO()
    print_nonempty(collided_table(), out)
    assert out.getvalue() == "2    a\n1    f\n"

    out = io.StringIO()
    print_nonempty(ProbingTable(5, Method.LINEAR_PROBING), out)
    assert out.getvalue() == ""


def test_print_full():
    out = io.StringIO()
    print_full(collided_table(), out)

    lines = out.getvalue().splitlines()
    assert lines[0] == "  Pos  Freq  Stats  Word"
    assert lines[1] == "-" * 40
    assert lines[2:] == [
        "    0     0     0",
        # collisions of the second inserted key, shown against slot 1
        "    1     0     1",
        "    2     2     0   a",
        "    3     1     0   f",
        "    4     0     0",
    ]


def test_print_stats():
    out = io.StringIO()
    print_stats(collided_table(), out, 5)

    lines = out.getvalue().splitlines()
    assert lines[:6] == [
        "",
        "Linear Probing",
        "",
        "Percent   Current    Percent    Average      Maximum",
        " Full     Entries    At Home   Collisions   Collisions",
        "-" * 54,
    ]
    # only 2 of 5 slots are filled, so the 60..100% rows are skipped
    assert [line.split() for line in lines[6:8]] == [
        ["20", "1", "100.0", "0.00", "0"],
        ["40", "2", "50.0", "0.50", "1"],
    ]
    assert lines[8:] == ["-" * 54, ""]
    assert lines[6] == "  20          1       100.0       0.00           0"


def test_print_stats_empty_table():
    out = io.StringIO()
    print_stats(ProbingTable(113, Method.DOUBLE_HASHING), out, 10)

    lines = out.getvalue().splitlines()
    assert lines[1] == "Double Hashing"
    assert lines[5] == lines[6] == "-" * 54
    assert len(lines) == 8


def test_print_stats_full_table():
    t = ProbingTable(11, Method.LINEAR_PROBING)
    for i in range(11):
        t.insert(f"w{i}")

    out = io.StringIO()
    print_stats(t, out, 4)
    rows = [line.split() for line in out.getvalue().splitlines()[6:-2]]

    assert [row[:2] for row in rows] == [["25", "2"], ["50", "5"], ["75", "8"], ["100", "11"]]
    history = t.insertion_collisions
    assert int(rows[-1][4]) == max(history)
    assert float(rows[-1][3]) == round(sum(history) / 11, 2)
    assert float(rows[-1][2]) == round(history.count(0) * 100 / 11, 1)
