from __future__ import annotations

from typing import Any

from ghq_core.constraints.constraint import Constraint


class NoConstraint(Constraint):
    """A constraint that represents no constraints"""

    @property
    def input_synopsis(self):
        return ''

    def __call__(self, value):
        return value


class EnsureChoice(Constraint):
    """Ensure an input is element of a set of possible values"""

    def __init__(self, *values: Any):
        self._choices = tuple(values)
        super().__init__()

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({", ".join(map(repr, self._choices))})'

    @property
    def choices(self) -> tuple[Any, ...]:
        return self._choices

    def __call__(self, value):
        if value not in self._choices:
            self.raise_for(
                value,
                '{__value__!r} is not one of {allowed}',
                allowed=self._choices,
            )
        return value

    @property
    def input_synopsis(self):
        return f'one of {{{",".join(repr(c) for c in self._choices)}}}'
