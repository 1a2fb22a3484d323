"""The two stacks, the eleven operations on them and measures of their order."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Callable, Iterable, Sequence

Observer = Callable[["Stacks", int], None]

OPERATION_CODES: dict[str, int] = {
    "sa": 11,
    "sb": 12,
    "ss": 13,
    "pa": 21,
    "pb": 22,
    "ra": 31,
    "rb": 32,
    "rr": 33,
    "rra": 41,
    "rrb": 42,
    "rrr": 43,
}

_CHANGES = ("sa", "sb", "ss", "pa", "pb")
_MOVES = ("ra", "rb", "rr", "rra", "rrb", "rrr")


def ranks(values: Sequence[int]) -> list[int]:
    """Return, for each value, its position in the sorted values."""
    ordered = sorted(values)
    first_index: dict[int, int] = {}
    for index, value in enumerate(ordered):
        first_index.setdefault(value, index)
    return [first_index[value] for value in values]


def count_not_progressive(values: Sequence[int]) -> int:
    """Count places where a value exceeds its circular successor."""
    if not values:
        return 0
    successors = list(values[1:]) + [values[0]]
    return sum(1 for current, following in zip(values, successors) if current > following)


def compute_disorder(values: Sequence[int]) -> float:
    """Return the fraction of pairs that appear in the wrong order."""
    if len(values) < 2:
        raise ValueError("disorder needs at least two values")
    mistakes = 0
    total_pairs = 0
    for i, left in enumerate(values):
        for right in values[i + 1:]:
            total_pairs += 1
            if left > right:
                mistakes += 1
    return mistakes / total_pairs


class Stacks:
    """Stack a (initially holding every value) and stack b (initially empty).

    The observer, when set, is called with a step code around each operation:
    0 before, the operation's own code, then 0 again once the stacks changed.
    """

    def __init__(self, values: Iterable[int], observer: Observer | None = None) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.total = len(self.a)
        self.rank_of: dict[int, int] = dict(zip(self.a, ranks(list(self.a))))
        self.counts: Counter[str] = Counter()
        self.observer = observer

    @property
    def ops(self) -> int:
        """Total number of operations executed."""
        return sum(self.counts.values())

    def _notify(self, step: int) -> None:
        if self.observer is not None:
            self.observer(self, step)

    def _run(self, name: str, action: Callable[[], bool]) -> None:
        self.counts[name] += 1
        self._notify(0)
        self._notify(OPERATION_CODES[name])
        if action():
            self._notify(0)

    @staticmethod
    def _swap(stack: deque[int]) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _push(source: deque[int], target: deque[int]) -> bool:
        if not source:
            return False
        target.appendleft(source.popleft())
        return True

    @staticmethod
    def _rotate(stack: deque[int], steps: int) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(steps)
        return True

    def sa(self) -> None:
        """Swap the first two elements of a."""
        self._run("sa", lambda: self._swap(self.a))

    def sb(self) -> None:
        """Swap the first two elements of b."""
        self._run("sb", lambda: self._swap(self.b))

    def ss(self) -> None:
        """Swap the first two elements of both stacks."""

        def both() -> bool:
            self._swap(self.a)
            self._swap(self.b)
            return True

        self._run("ss", both)

    def pa(self) -> None:
        """Move the top of b onto a."""
        self._run("pa", lambda: self._push(self.b, self.a))

    def pb(self) -> None:
        """Move the top of a onto b."""
        self._run("pb", lambda: self._push(self.a, self.b))

    def ra(self) -> None:
        """Rotate a: its first element becomes the last."""
        self._run("ra", lambda: self._rotate(self.a, -1))

    def rb(self) -> None:
        """Rotate b: its first element becomes the last."""
        self._run("rb", lambda: self._rotate(self.b, -1))

    def rr(self) -> None:
        """Rotate both stacks."""

        def both() -> bool:
            self._rotate(self.a, -1)
            self._rotate(self.b, -1)
            return True

        self._run("rr", both)

    def rra(self) -> None:
        """Reverse-rotate a: its last element becomes the first."""
        self._run("rra", lambda: self._rotate(self.a, 1))

    def rrb(self) -> None:
        """Reverse-rotate b: its last element becomes the first."""
        self._run("rrb", lambda: self._rotate(self.b, 1))

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""

        def both() -> bool:
            self._rotate(self.a, 1)
            self._rotate(self.b, 1)
            return True

        self._run("rrr", both)

    def execute(self, instruction: str, quantity: int = 1) -> None:
        """Run a named operation a number of times; unknown names do nothing."""
        if instruction not in OPERATION_CODES:
            return
        operation: Callable[[], None] = getattr(self, instruction)
        for _ in range(quantity):
            operation()

    def sorting_done(self) -> int:
        """Return 0 if unsorted, 1 if sorted, 2 if sorted within the tight limits."""
        done = 1
        if len(self.a) != self.total or self.b:
            done = 0
        values = list(self.a)
        if any(later <= earlier for earlier, later in zip(values, values[1:])):
            done = 0
        nb, ops = self.total, self.ops
        if done == 1 and ((nb >= 100 and ops <= 700) or (nb >= 500 and ops <= 5500)):
            done = 2
        return done

    def changes(self) -> int:
        """Number of swap and push operations executed."""
        return sum(self.counts[name] for name in _CHANGES)

    def moves(self) -> int:
        """Number of rotation operations executed."""
        return sum(self.counts[name] for name in _MOVES)