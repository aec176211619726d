"""Base class for constraints"""

from __future__ import annotations

from abc import (
    ABC,
    abstractmethod,
)
from typing import Any

from ghq_core.constraints.exceptions import ConstraintError


class Constraint(ABC):
    """Base class for value coercion/validation

    A constraint is a callable that receives a value, and returns it
    (possibly converted to a target type), or raises
    :class:`ConstraintError`. Each constraint also describes the input it
    accepts, for use in documentation and error messages.
    """

    def __str__(self) -> str:
        return f'Constraint[{self.input_synopsis}]'

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}()'

    def raise_for(self, value: Any, msg: str, **ctx: Any) -> None:
        """Raise a ``ConstraintError`` for this constraint

        ``msg`` can contain ``format()`` placeholders for any key in
        ``ctx``, and ``{__value__}`` for the violating value.
        """
        if ctx:
            raise ConstraintError(self, value, msg, ctx)
        raise ConstraintError(self, value, msg)

    @property
    @abstractmethod
    def input_synopsis(self) -> str:
        """Brief, single line summary of valid input"""

    @property
    def input_description(self) -> str:
        """Full description of valid input

        A single, compact paragraph is preferred. Defaults to the synopsis.
        """
        return self.input_synopsis

    @abstractmethod
    def __call__(self, value: Any) -> Any:
        """Validate and/or convert ``value``, and return the outcome"""
