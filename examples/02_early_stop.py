from __future__ import annotations

from _infra import ORDERS, ReadCounter, banner, run

import pushseq as ps
from kungfu import Error, Ok


def main() -> None:
    banner("02_early_stop: stop propagates through the whole chain")

    source = ReadCounter(ORDERS)
    pipeline = (
        ps.from_collection(source)
        .filter(lambda o: o.paid)
        .map(lambda o: o.total)
        .enumerate()
    )

    match pipeline.find(lambda e: e.value > 500):
        case Ok(ps.Enumerated(index, total)):
            print(f"paid order #{index} worth {total}")
        case Error(err):
            print(f"error: {err}")
    print(f"reads: {source.reads} of {len(source)}")

    source.reads = 0
    tail = ps.concat(ps.from_collection(source), ps.from_collection(source))
    print(f"first three of doubled: {[o.id for o in tail.take(3).collect()]}")
    print(f"reads: {source.reads}")


if __name__ == "__main__":
    run(main)
