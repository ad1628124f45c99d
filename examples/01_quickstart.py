from __future__ import annotations

from _infra import ORDERS, Order, banner, run

import pushseq as ps


def main() -> None:
    banner("01_quickstart: from_collection + map + filter + reduce")

    paid = ps.from_collection(ORDERS).filter(lambda o: o.paid)

    revenue = paid.map(lambda o: o.total).reduce(0.0, lambda acc, t: acc + t)
    print(f"revenue: {revenue:.2f}")

    big = paid.filter(lambda o: o.total > 100).map(lambda o: o.id).collect()
    print(f"big orders: {big}")

    print(f"any unpaid: {ps.from_collection(ORDERS).any(lambda o: not o.paid)}")
    print(f"all positive: {ps.from_collection(ORDERS).all(lambda o: o.total > 0)}")

    for pos, order in paid.enumerate().take(3).collect():
        print(f"#{pos}: {order.customer} {order.total}")

    customers = [o.customer for o in ORDERS]
    totals = [o.total for o in ORDERS]
    print(f"zip: {ps.zip(customers, totals).take(2).collect()}")
    print(f"zip mismatch: {ps.zip(customers, totals[:-1]).collect()}")

    def label(order: Order) -> str:
        return f"{order.customer}:{order.id}"

    print(f"labels: {ps.concat(paid.take(1), paid.skip(4)).map(label).collect()}")


if __name__ == "__main__":
    run(main)
