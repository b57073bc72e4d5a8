from typing import TextIO

from .shared import fprintf
from .table import ProbingTable

_STATS_RULE = "-" * 54
_TABLE_RULE = "-" * 40


def print_nonempty(table: ProbingTable, stream: TextIO):
    for entry in table.entries:
        if entry.key is None:
            continue
        fprintf(stream, "{0:d}    {1:s}\n", entry.frequency, entry.key)


def print_full(table: ProbingTable, stream: TextIO):
    # The stats column is read by slot position although it was written in
    # insertion order, so it only describes a key whose slot matches its rank.
    fprintf(stream, "  Pos  Freq  Stats  Word\n")
    fprintf(stream, "{0:s}\n", _TABLE_RULE)

    for i, entry in enumerate(table.entries):
        fprintf(
            stream,
            "{0:5d} {1:5d} {2:5d}",
            i,
            entry.frequency,
            table.insertion_collisions[i],
        )
        if entry.key is not None:
            fprintf(stream, "   {0:s}\n", entry.key)
        else:
            fprintf(stream, "\n")


def print_stats(table: ProbingTable, stream: TextIO, num_stats: int):
    """
    Print how the table looked at `num_stats` evenly spaced fill levels.

    For each level the rows show the share of keys placed in their home slot,
    and the average and maximum collisions over the keys inserted up to that
    point. Levels the table never reached are left out.
    """
    fprintf(stream, "\n{0:s}\n\n", table.method.value)
    fprintf(stream, "Percent   Current    Percent    Average      Maximum\n")
    fprintf(stream, " Full     Entries    At Home   Collisions   Collisions\n")
    fprintf(stream, "{0:s}\n", _STATS_RULE)

    for i in range(1, num_stats + 1):
        print_stats_line(table, stream, 100 * i // num_stats)

    fprintf(stream, "{0:s}\n\n", _STATS_RULE)


def print_stats_line(table: ProbingTable, stream: TextIO, percent_full: int):
    current_entries = table.capacity * percent_full // 100
    if not 0 < current_entries <= table.num_keys:
        return

    history = table.insertion_collisions[:current_entries]
    at_home = sum(1 for collisions in history if collisions == 0)

    fprintf(
        stream,
        "{0:4d} {1:10d} {2:11.1f} {3:10.2f} {4:11d}\n",
        percent_full,
        current_entries,
        at_home * 100.0 / current_entries,
        sum(history) / current_entries,
        max(history),
    )
