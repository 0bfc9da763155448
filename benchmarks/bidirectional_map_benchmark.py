import argparse
import random

from bimap import BidirectionalMap
from bimap.utility.logging.scoped_logger import ScopedLogger
from bimap.utility.logging.utility import LoggingLevel, setup_logger


def get_args():
    parser = argparse.ArgumentParser(
        "benchmark BidirectionalMap", formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("--size", "-s", type=int, default=1_000_000, help="number of entries to insert")
    parser.add_argument("--rounds", "-r", type=int, default=3, help="number of times to repeat the benchmark")
    parser.add_argument(
        "--logging-level",
        "-ll",
        type=str,
        choices=list(LoggingLevel.__members__),
        default=LoggingLevel.INFO.name,
        help="logging level",
    )
    return parser.parse_args()


def run_round(size: int):
    keys = [f"key-{i}" for i in range(size)]
    values = list(range(size))
    random.shuffle(values)

    bidirectional_map = BidirectionalMap()

    with ScopedLogger(f"set {size} entries"):
        for key, value in zip(keys, values):
            bidirectional_map.set(key, value)

    with ScopedLogger(f"get {size} entries"):
        for key in keys:
            bidirectional_map.get(key)

    with ScopedLogger(f"get_reverse {size} entries"):
        for value in values:
            bidirectional_map.get_reverse(value)

    with ScopedLogger(f"delete {size} entries"):
        for key in keys:
            bidirectional_map.delete(key)

    assert bidirectional_map.size == 0


def main():
    args = get_args()
    setup_logger(logging_level=args.logging_level)

    for _ in range(args.rounds):
        run_round(args.size)


if __name__ == "__main__":
    main()
