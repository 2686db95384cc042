"""Thread coordination primitives built on condition variables."""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Callable


class FooBar:
    """Lets two threads print "foo" and "bar" alternately, n times each."""

    def __init__(self, n: int) -> None:
        self._n = n
        self._cond = threading.Condition()
        self._foo_printed = False

    def _run(self, turn: bool, action: Callable[[], None]) -> None:
        for _ in range(self._n):
            with self._cond:
                self._cond.wait_for(lambda: self._foo_printed is turn)
                action()
                self._foo_printed = not self._foo_printed
                self._cond.notify_all()

    def foo(self, print_foo: Callable[[], None]) -> None:
        """Call print_foo n times, each time before the matching bar."""
        self._run(False, print_foo)

    def bar(self, print_bar: Callable[[], None]) -> None:
        """Call print_bar n times, each time after the matching foo."""
        self._run(True, print_bar)


class ZeroEvenOdd:
    """Lets three threads print 0 1 0 2 0 3 ... 0 n between them."""

    def __init__(self, n: int) -> None:
        self._n = n
        self._counter = 1
        self._cond = threading.Condition()

    def _finished(self) -> bool:
        return self._counter > 2 * self._n

    def _run(self, ready: Callable[[], bool], print_number: Callable[[int], None]) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(lambda: self._finished() or ready())
                if self._finished():
                    self._cond.notify_all()
                    return
                print_number(0 if self._counter % 2 else self._counter // 2)
                self._counter += 1
                self._cond.notify_all()

    def zero(self, print_number: Callable[[int], None]) -> None:
        """Print every zero of the sequence."""
        self._run(lambda: self._counter % 2 == 1, print_number)

    def even(self, print_number: Callable[[int], None]) -> None:
        """Print every even number of the sequence."""
        self._run(
            lambda: self._counter % 2 == 0 and (self._counter // 2) % 2 == 0,
            print_number,
        )

    def odd(self, print_number: Callable[[int], None]) -> None:
        """Print every odd number of the sequence."""
        self._run(
            lambda: self._counter % 2 == 0 and (self._counter // 2) % 2 == 1,
            print_number,
        )


class H2O:
    """Groups hydrogen and oxygen threads into water molecules.

    Each oxygen release is followed by exactly two hydrogen releases.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._hydrogen_slots = 0

    def hydrogen(self, release_hydrogen: Callable[[], None]) -> None:
        """Release one hydrogen once an oxygen has opened a slot for it."""
        with self._cond:
            self._cond.wait_for(lambda: self._hydrogen_slots > 0)
            release_hydrogen()
            self._hydrogen_slots -= 1
            self._cond.notify_all()

    def oxygen(self, release_oxygen: Callable[[], None]) -> None:
        """Release one oxygen once the previous molecule is complete."""
        with self._cond:
            self._cond.wait_for(lambda: self._hydrogen_slots == 0)
            release_oxygen()
            self._hydrogen_slots = 2
            self._cond.notify_all()


class BoundedBlockingQueue:
    """A thread-safe FIFO queue whose producers block when it is over capacity.

    An enqueue waits while the queue holds more than ``capacity`` items.
    """

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        self._items: deque[int] = deque()
        self._cond = threading.Condition()

    def enqueue(self, element: int) -> None:
        """Append an element, waiting for room if necessary."""
        with self._cond:
            self._cond.wait_for(lambda: len(self._items) <= self._capacity)
            self._items.append(element)
            self._cond.notify_all()

    def dequeue(self) -> int:
        """Remove and return the oldest element, waiting if the queue is empty."""
        with self._cond:
            self._cond.wait_for(lambda: len(self._items) > 0)
            value = self._items.popleft()
            self._cond.notify_all()
            return value

    def size(self) -> int:
        """Return the number of queued elements."""
        with self._cond:
            return len(self._items)


class FizzBuzz:
    """Lets four threads print the fizz-buzz sequence from 1 to n in order."""

    def __init__(self, n: int) -> None:
        self._n = n
        self._counter = 1
        self._cond = threading.Condition()

    def _run(self, ready: Callable[[], bool], action: Callable[[], None]) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(lambda: self._counter > self._n or ready())
                if self._counter > self._n:
                    self._cond.notify_all()
                    return
                action()
                self._counter += 1
                self._cond.notify_all()

    def fizz(self, print_fizz: Callable[[], None]) -> None:
        """Handle numbers divisible by 3 but not by 5."""
        self._run(lambda: self._counter % 3 == 0 and self._counter % 5 != 0, print_fizz)

    def buzz(self, print_buzz: Callable[[], None]) -> None:
        """Handle numbers divisible by 5 but not by 3."""
        self._run(lambda: self._counter % 5 == 0 and self._counter % 3 != 0, print_buzz)

    def fizzbuzz(self, print_fizzbuzz: Callable[[], None]) -> None:
        """Handle numbers divisible by both 3 and 5."""
        self._run(
            lambda: self._counter % 3 == 0 and self._counter % 5 == 0, print_fizzbuzz
        )

    def number(self, print_number: Callable[[int], None]) -> None:
        """Handle numbers divisible by neither 3 nor 5."""
        self._run(
            lambda: self._counter % 3 != 0 and self._counter % 5 != 0,
            lambda: print_number(self._counter),
        )