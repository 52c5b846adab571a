"""The two rank-labelled stacks and the operations allowed on them."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass
from enum import Enum
from itertools import cycle, islice, pairwise
from typing import Callable, Iterable, Iterator, TextIO


class Operation(str, Enum):
    """The instructions the sorter emits, named as they are printed."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"


@dataclass
class Element:
    """A number on a stack and its 1-based rank among all input numbers."""

    value: int
    position: int


class Stack:
    """A circular stack whose top is the first element."""

    def __init__(self, elements: Iterable[Element] = ()) -> None:
        self._items: deque[Element] = deque(elements)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Element]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({[e.position for e in self._items]!r})"

    def top(self) -> Element:
        """Return the top element."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[0]

    def swap(self) -> None:
        """Exchange the two top elements; does nothing with fewer than two."""
        if len(self._items) < 2:
            return
        first = self._items.popleft()
        second = self._items.popleft()
        self._items.appendleft(first)
        self._items.appendleft(second)

    def push_onto(self, other: Stack) -> None:
        """Move the top element onto ``other``; does nothing when empty."""
        if self._items:
            other._items.appendleft(self._items.popleft())

    def rotate(self) -> None:
        """Move the top element to the bottom."""
        self._items.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom element to the top."""
        self._items.rotate(1)

    def _window(self, n: int) -> list[Element]:
        # The stack is a ring: a window longer than the stack wraps around.
        return list(islice(cycle(self._items), n))

    def is_ascending(self, n: int) -> bool:
        """Whether the first ``n`` ranks (wrapping around) never decrease."""
        if not self._items:
            return False
        return all(a.position <= b.position for a, b in pairwise(self._window(n)))

    def is_descending(self, n: int) -> bool:
        """Whether the first ``n`` ranks (wrapping around) never increase."""
        if not self._items:
            return False
        return all(a.position >= b.position for a, b in pairwise(self._window(n)))

    def biggest_index(self, n: int) -> int:
        """1-based index of the highest rank among the first ``n``; 0 if empty."""
        if not self._items:
            return 0
        best_index = 1
        best = None
        for index, element in enumerate(self._window(max(n, 1)), start=1):
            if best is None or element.position > best:
                best = element.position
                best_index = index
        return best_index


class Stacks:
    """Stacks A and B together, writing each applied operation to ``output``."""

    def __init__(
        self, elements: Iterable[Element] = (), output: TextIO | None = None
    ) -> None:
        self.a = Stack(elements)
        self.b = Stack()
        self.total = len(self.a)
        self.output = output
        self.history: list[Operation] = []

    def apply(self, operation: Operation | str) -> Stacks:
        """Perform ``operation``, record it and print its name."""
        operation = Operation(operation)
        _ACTIONS[operation](self)
        self.history.append(operation)
        if self.output is not None:
            self.output.write(f"{operation.value}\n")
        return self

    def sa(self) -> Stacks:
        return self.apply(Operation.SA)

    def sb(self) -> Stacks:
        return self.apply(Operation.SB)

    def ss(self) -> Stacks:
        return self.apply(Operation.SS)

    def ra(self) -> Stacks:
        return self.apply(Operation.RA)

    def rb(self) -> Stacks:
        return self.apply(Operation.RB)

    def rr(self) -> Stacks:
        return self.apply(Operation.RR)

    def rra(self) -> Stacks:
        return self.apply(Operation.RRA)

    def rrb(self) -> Stacks:
        return self.apply(Operation.RRB)

    def rrr(self) -> Stacks:
        return self.apply(Operation.RRR)

    def pa(self) -> Stacks:
        return self.apply(Operation.PA)

    def pb(self) -> Stacks:
        return self.apply(Operation.PB)

    def push_times(self, n: int, to_b: bool) -> Stacks:
        """Apply ``pb`` (or ``pa`` when ``to_b`` is false) ``n`` times."""
        operation = Operation.PB if to_b else Operation.PA
        for _ in range(n):
            self.apply(operation)
        return self

    def reverse_rotate_times(self, n: int, on_b: bool) -> Stacks:
        """Apply ``rrb`` (or ``rra`` when ``on_b`` is false) ``n`` times."""
        operation = Operation.RRB if on_b else Operation.RRA
        for _ in range(n):
            self.apply(operation)
        return self


def _both(first: Callable[[Stack], None]) -> Callable[[Stacks], None]:
    def action(stacks: Stacks) -> None:
        first(stacks.a)
        first(stacks.b)

    return action


_ACTIONS: dict[Operation, Callable[[Stacks], None]] = {
    Operation.SA: lambda s: s.a.swap(),
    Operation.SB: lambda s: s.b.swap(),
    Operation.SS: _both(Stack.swap),
    Operation.PA: lambda s: s.b.push_onto(s.a),
    Operation.PB: lambda s: s.a.push_onto(s.b),
    Operation.RA: lambda s: s.a.rotate(),
    Operation.RB: lambda s: s.b.rotate(),
    Operation.RR: _both(Stack.rotate),
    Operation.RRA: lambda s: s.a.reverse_rotate(),
    Operation.RRB: lambda s: s.b.reverse_rotate(),
    Operation.RRR: _both(Stack.reverse_rotate),
}

STDOUT = sys.stdout