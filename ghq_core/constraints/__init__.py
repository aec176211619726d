"""Parameter validation, coercion, and documentation

Each :class:`Constraint` class focuses on a specific aspect, such as type
coercion, or checking particular input properties. An instance is
customized with constructor parameters, and performs its task when called
with an input value. Constraints also describe valid input, for
documentation and error messages.

Violations are reported with :class:`ConstraintError`, a ``ValueError``
that carries the violating value and the constraint in a structured
fashion.

.. currentmodule:: ghq_core.constraints
.. autosummary::
   :toctree: generated

   Constraint
   ConstraintError
   NoConstraint
   EnsureChoice
   EnsurePath
   EnsureRemoteReference
   EnsureVCSBackend
"""

__all__ = [
    'Constraint',
    'ConstraintError',
    'NoConstraint',
    'EnsureChoice',
    'EnsurePath',
    'EnsureRemoteReference',
    'EnsureVCSBackend',
]


from .basic import (
    EnsureChoice,
    NoConstraint,
)
from .constraint import Constraint
from .exceptions import ConstraintError
from .path import EnsurePath
from .remote import EnsureRemoteReference
from .vcs import EnsureVCSBackend
