"""Ball-outcome suppliers.

A supplier is a callable taking the bowler's name and the pins standing and
returning how many pins the next ball knocks down.
"""
import random

from bowling import exceptions
from bowling import fields


class RandomBallSupplier(object):
    """Knocks down a uniformly random number of the standing pins.

    Args:
        seed: seed of the random generator, seeded once per supplier
        prompt: optional callable invoked with the bowler's name before each
            ball, e.g. to wait for the bowler to press enter
    """

    def __init__(self, seed=None, prompt=None):
        self.random = random.Random(seed)
        self.prompt = prompt

    def __call__(self, name, pins_remaining):
        if self.prompt is not None:
            self.prompt(name)
        return self.random.randint(0, pins_remaining)


class ScriptedBallSupplier(object):
    """Replays a list of ball marks.

    ``X`` and ``/`` knock down every standing pin, ``-`` none and a digit its
    own value. Whether the value fits the pins standing is left to the
    scoring engine; whether an ``X`` was a strike and a ``/`` a spare is
    checked by :meth:`confirm` once the ball has been recorded.
    """

    def __init__(self, marks):
        for mark in marks:
            fields.validate_mark(mark)
        self.marks = list(marks)
        self.position = 0

    def __call__(self, name, pins_remaining):
        if self.position >= len(self.marks):
            raise exceptions.ScriptExhaustedException(name, self.position)
        mark = self.marks[self.position]
        self.position += 1
        if mark in ('X', '/'):
            return pins_remaining
        if mark == '-':
            return 0
        return int(mark)

    @property
    def remaining(self):
        return len(self.marks) - self.position

    def confirm(self, ball):
        """Checks the last replayed ball was scored the way it was marked."""
        mark = self.marks[self.position - 1]
        if mark in ('X', '/') and ball.mark != mark:
            raise exceptions.ScriptMismatchException(
                mark, self.position, ball.mark)

    def finish(self):
        """Checks every scripted ball was bowled."""
        if self.remaining:
            raise exceptions.ScriptNotFinishedException(self.remaining)
