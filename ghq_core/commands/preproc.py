"""Preprocessing of command parameters"""

from __future__ import annotations

from abc import (
    ABC,
    abstractmethod,
)
from typing import (
    TYPE_CHECKING,
    Any,
)

if TYPE_CHECKING:
    from collections.abc import (
        Container,
        Mapping,
    )

from ghq_core.commands.exceptions import ParamErrors
from ghq_core.config import (
    ConfigItem,
    get_defaults,
    get_manager,
)
from ghq_core.constraints import (
    Constraint,
    ConstraintError,
    EnsureChoice,
    NoConstraint,
)

violation_modes = EnsureChoice('raise-early', 'raise-at-end')

# register defaults of configuration supported by the code in this module
defaults = get_defaults()
defaults['ghq.runtime.parameter-violation'] = ConfigItem(
    'raise-early',
    coercer=violation_modes,
)


class ParamProcessor(ABC):
    """Abstract base class for parameter processors

    Derived classes must implement `__call__()`, which receives two parameters:

    - ``kwargs``: a mapping of ``str`` parameter names to arbitrary values
    - ``at_default``: a ``set`` of parameter names, where the value given via
      ``kwargs`` is identical to the respective implementation default (i.e.,
      the default set in a function's signature.
    """

    @abstractmethod
    def __call__(
        self,
        kwargs: Mapping[str, Any],
        at_default: set[str] | None = None,
    ) -> Mapping[str, Any]:
        """ """


class JointParamProcessor(ParamProcessor):
    """Parameter preprocessor applying a constraint to each parameter

    Each parameter value is passed through the :class:`Constraint` given
    for it in ``param_constraints``, and replaced with the outcome::

      >>> pp = JointParamProcessor({'on_failure': EnsureChoice('stop', 'ignore')})
      >>> pp({'on_failure': 'stop'})
      {'on_failure': 'stop'}

    Parameters without a constraint are passed on as-is. So are parameters
    whose value is identical to their default (as reported via
    ``at_default``), unless their name is listed in ``proc_defaults``. This
    way, a constraint need not cover a special default, like ``None``.

    With ``on_error='raise-early'``, processing stops at the first
    violation. With ``'raise-at-end'``, all parameters are processed, and
    all violations are reported jointly. Either way, a :class:`ParamErrors`
    exception is raised. When ``on_error`` is ``None``, the mode is taken
    from the configuration setting ``ghq.runtime.parameter-violation``.
    Only :class:`ConstraintError` exceptions are collected, any other
    exception is propagated immediately.
    """

    def __init__(
        self,
        param_constraints: Mapping[str, Constraint],
        *,
        proc_defaults: Container[str] | None = None,
        on_error: str | None = None,
    ):
        super().__init__()
        self._param_constraints = param_constraints
        self._proc_defaults = proc_defaults or set()
        if on_error is not None:
            try:
                violation_modes(on_error)
            except ConstraintError as e:
                msg = "`on_error` must be 'raise-early' or 'raise-at-end'"
                raise ValueError(msg) from e
        self._on_error = on_error

    def __repr__(self) -> str:
        return (
            f'{self.__class__.__name__}('
            f'{self._param_constraints!r}, on_error={self._on_error!r})'
        )

    @property
    def param_constraints(self) -> Mapping[str, Constraint]:
        return self._param_constraints

    def __call__(
        self,
        kwargs: Mapping[str, Any],
        at_default: set[str] | None = None,
    ) -> Mapping[str, Any]:
        """Return the processed parameters

        Raises
        ------
        ParamErrors
          if any constraint was violated.
        """
        on_error = self._on_error
        if on_error is None:
            on_error = (
                get_manager()
                .get(
                    'ghq.runtime.parameter-violation',
                    'raise-early',
                )
                .value
            )
        exceptions: dict[str, ConstraintError] = {}
        processed: dict[str, Any] = {}
        for pname, value in kwargs.items():
            if (
                at_default is not None
                and pname in at_default
                and pname not in self._proc_defaults
            ):
                # a command must handle its own defaults
                processed[pname] = value
                continue
            validator = self._param_constraints.get(pname, NoConstraint())
            try:
                processed[pname] = validator(value)
            except ConstraintError as e:
                exceptions[pname] = e
                if on_error == 'raise-early':
                    raise ParamErrors(exceptions) from e

        if exceptions:
            raise ParamErrors(exceptions)
        return processed
