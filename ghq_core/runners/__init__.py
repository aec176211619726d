"""Execution of subprocesses

This module is the boundary to all external tools. VCS tools (``git``,
``svn``, ``hg``) are executed with :func:`~ghq_core.runners.call_vcs`,
which normalizes failures: a tool that cannot be started raises
:class:`~ghq_core.runners.ToolInvocationError`, a tool that exits with a
non-zero status raises :class:`~ghq_core.runners.ToolExecutionError`, a
:class:`~ghq_core.runners.CommandError` subclass.

Any callable matching the signature of :func:`call_vcs` (i.e., taking a
command list and an optional ``cwd`` keyword argument) can be given as a
``runner`` to the VCS backends in place of the default.

In addition, a few convenience functions are provided to execute Git
commands for internal queries, such as reading Git configuration.

.. currentmodule:: ghq_core.runners
.. autosummary::
   :toctree: generated

   call_vcs
   call_git
   iter_subproc
   iter_git_subproc
   CommandError
   ToolExecutionError
   ToolInvocationError
"""

__all__ = [
    'CommandError',
    'ToolExecutionError',
    'ToolInvocationError',
    'iter_subproc',
    'iter_git_subproc',
    'call_git',
    'call_vcs',
]


from datasalad.runners import (
    CommandError,
    iter_subproc,
)

from .exceptions import (
    ToolExecutionError,
    ToolInvocationError,
)
from .git import (
    call_git,
    iter_git_subproc,
)
from .vcs import call_vcs
