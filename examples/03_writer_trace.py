from __future__ import annotations

from _infra import ORDERS, banner, run

import pushseq as ps
from kungfu import Error, Ok


def main() -> None:
    banner("03_writer_trace: terminal value + traversal log")

    totals = ps.from_collection(ORDERS).map(lambda o: o.total)

    wr = ps.any_w(totals, lambda t: t > 500, policy=ps.TracePolicy.bounded(3))
    match wr.result:
        case Ok(found):
            print(f"any > 500: {found}")
        case Error(err):
            print(f"error: {err!r}")
    print(f"log: {list(wr.log)!r}")

    wr = ps.find_w(totals, lambda t: t > 5000, policy=ps.TracePolicy.counts_only())
    match wr.result:
        case Ok(total):
            print(f"found: {total}")
        case Error(err):
            print(f"error: {err}")
    print(f"terminal: {wr.log.select(ps.Exhausted)!r}")


if __name__ == "__main__":
    run(main)
