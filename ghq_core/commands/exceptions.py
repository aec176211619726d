from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ghq_core.constraints import ConstraintError


class ParamErrors(ValueError):
    """Exception for one or more parameter constraint violations

    :attr:`errors` maps the name of each offending parameter to the
    :class:`~ghq_core.constraints.ConstraintError` it caused.
    """

    def __init__(self, errors: Mapping[str, ConstraintError]):
        super().__init__(errors)
        self._errors = dict(errors)

    @property
    def errors(self) -> MappingProxyType[str, ConstraintError]:
        return MappingProxyType(self._errors)

    @property
    def messages(self) -> list[str]:
        return [e.msg for e in self._errors.values()]

    def __str__(self) -> str:
        n = len(self._errors)
        return f'{n} parameter constraint violation{"s" if n > 1 else ""}\n' + (
            '\n'.join(f'{p}\n  {e.msg}' for p, e in self._errors.items())
        )
