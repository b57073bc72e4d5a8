import argparse
import sys

from .primes import next_prime
from .report import print_full, print_nonempty, print_stats
from .shared import printf_err
from .table import Method, ProbingTable
from .words import read_words

DEFAULT_SIZE = 113
DEFAULT_SNAPSHOTS = 10

_USAGE_ERROR = 64
_MEMORY_ERROR = 70

_DESCRIPTION = """\
Perform various operations using a hash table.  By default, words are
read from stdin and added to the hash table, before being printed out
alongside their frequencies to stdout."""


class _UsageError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):
        raise _UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="probetable",
        usage="%(prog)s [OPTION]... <STDIN>",
        description=_DESCRIPTION,
        add_help=False,
    )
    parser.add_argument(
        "-d",
        dest="method",
        action="store_const",
        const=Method.DOUBLE_HASHING,
        default=Method.LINEAR_PROBING,
        help="Use double hashing (linear probing is the default)",
    )
    parser.add_argument(
        "-e",
        dest="print_table",
        action="store_true",
        help="Display entire contents of hash table on stderr",
    )
    parser.add_argument(
        "-p",
        dest="print_stats",
        action="store_true",
        help="Print stats info instead of frequencies & words",
    )
    parser.add_argument(
        "-s",
        dest="snapshots",
        metavar="SNAPSHOTS",
        type=int,
        default=0,
        help="Show SNAPSHOTS stats snapshots (if -p is used)",
    )
    parser.add_argument(
        "-t",
        dest="table_size",
        metavar="TABLESIZE",
        type=int,
        default=None,
        help="Use the first prime >= TABLESIZE as table size",
    )
    parser.add_argument("-h", action="help", help="Display this message")
    return parser


def run(argv: list[str]) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except _UsageError as e:
        printf_err("probetable: {0:s}\n", str(e))
        parser.print_help(sys.stderr)
        return _USAGE_ERROR

    capacity = DEFAULT_SIZE if args.table_size is None else next_prime(args.table_size)

    try:
        table = ProbingTable(capacity, args.method)
        for word in read_words(sys.stdin):
            table.insert(word)
    except MemoryError:
        printf_err("probetable: memory allocation failed\n")
        return _MEMORY_ERROR

    if args.print_table:
        print_full(table, sys.stderr)

    if args.print_stats:
        snapshots = args.snapshots if args.snapshots > 0 else DEFAULT_SNAPSHOTS
        print_stats(table, sys.stdout, snapshots)
    else:
        print_nonempty(table, sys.stdout)

    return 0


def main():
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
