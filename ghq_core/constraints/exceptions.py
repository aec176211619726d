from __future__ import annotations

from textwrap import indent
from types import MappingProxyType
from typing import (
    Any,
)


class ConstraintError(ValueError):
    """Exception type raised by constraints when their conditions are violated

    The message is a ``format()`` template that is interpolated on access
    with the context mapping ``ctx``. Beyond the keys in ``ctx``, the
    template can use ``{__value__}`` (the violating value), and
    ``{__itemized_causes__}`` (a bullet list of the exceptions given as
    ``__caused_by__`` in ``ctx``).

    Any other code can inspect :attr:`constraint`, :attr:`value`,
    :attr:`context`, and :attr:`caused_by` for structured error reporting.
    """

    def __init__(
        self,
        constraint,
        value: Any,
        msg: str,
        ctx: dict[str, Any] | None = None,
    ):
        # `msg` first, where `ValueError` would have it
        super().__init__(msg, constraint, value, ctx)

    @property
    def msg(self) -> str:
        """The interpolated message on the constraint violation"""
        ctx = dict(self.context)
        ctx['__value__'] = self.value
        if self.caused_by:
            ctx['__itemized_causes__'] = indent(
                '\n'.join(f'- {c!s}' for c in self.caused_by),
                '  ',
            )
        return self.args[0].format(**ctx)

    @property
    def constraint(self):
        """The violated constraint instance"""
        return self.args[1]

    @property
    def value(self):
        """The value that violated the constraint"""
        return self.args[2]

    @property
    def context(self) -> MappingProxyType:
        """Read-only view of the ``ctx`` constructor argument"""
        return MappingProxyType(self.args[3] or {})

    @property
    def caused_by(self) -> tuple[Exception, ...] | None:
        """Any underlying exceptions, or ``None``"""
        cb = self.context.get('__caused_by__', None)
        if cb is None:
            return None
        if isinstance(cb, Exception):
            return (cb,)
        return tuple(cb)

    def __str__(self) -> str:
        return self.msg

    def __repr__(self) -> str:
        msg, constraint, value, ctx = self.args
        return (
            f'{self.__class__.__name__}({constraint!r}, {value!r}, {msg!r}, {ctx!r})'
        )
