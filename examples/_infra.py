from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Order:
    id: int
    customer: str
    total: float
    paid: bool = True


ORDERS: tuple[Order, ...] = (
    Order(1, "ada", 120.0),
    Order(2, "bob", 35.5, paid=False),
    Order(3, "ada", 12.0),
    Order(4, "cy", 980.0),
    Order(5, "bob", 44.0),
    Order(6, "cy", 5.0, paid=False),
)


@dataclass(slots=True)
class ReadCounter(Sequence[Order]):
    """Tuple wrapper that counts element reads."""

    items: tuple[Order, ...]
    reads: int = 0

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Order:
        order = self.items[index]
        self.reads += 1
        return order


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], None]) -> None:  # pragma: no cover (examples only)
    main()
