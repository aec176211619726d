"""Clone and update working copies with external VCS tools

Four kinds of repositories are supported, each with a member of
:class:`VCSBackend`: Git, Subversion, Git-SVN, and Mercurial. All
backends offer the same two operations, ``clone`` and ``update``, and
translate them into a command of their respective tool. Actual command
execution is delegated to a runner (by default
:func:`~ghq_core.runners.call_vcs`), which can be replaced, for example,
to record commands rather than running them.

:class:`BackendRegistry` selects the backend for a repository reference,
and :class:`GetOrchestrator` decides whether a working copy needs to be
cloned, or updated.

.. currentmodule:: ghq_core.vcs
.. autosummary::
   :toctree: generated

   VCSBackend
   BackendRegistry
   GetOrchestrator
   GetOutcome
   GetAction
   CloneOptions
   ConfigurationError
   FilesystemError
   ensure_parent_dir
"""

__all__ = [
    'VCSBackend',
    'BackendRegistry',
    'GetOrchestrator',
    'GetOutcome',
    'GetAction',
    'CloneOptions',
    'ConfigurationError',
    'FilesystemError',
    'ensure_parent_dir',
]

from .backend import (
    VCSBackend,
    ensure_parent_dir,
)
from .exceptions import (
    ConfigurationError,
    FilesystemError,
)
from .orchestrator import (
    CloneOptions,
    GetAction,
    GetOrchestrator,
    GetOutcome,
)
from .registry import BackendRegistry
