from __future__ import annotations

from typing import Any

from ghq_core.constraints.constraint import Constraint
from ghq_core.vcs import (
    ConfigurationError,
    VCSBackend,
)


class EnsureVCSBackend(Constraint):
    """Ensure a supported kind of repository

    Any name (or alias) known to :meth:`~ghq_core.vcs.VCSBackend.from_name`
    is converted to the respective :class:`~ghq_core.vcs.VCSBackend`.
    """

    @property
    def input_synopsis(self):
        return 'repository kind (git, svn, git-svn, hg)'

    def __call__(self, value: Any) -> VCSBackend:
        if isinstance(value, VCSBackend):
            return value
        try:
            return VCSBackend.from_name(str(value))
        except ConfigurationError as e:
            self.raise_for(
                value,
                '{__value__!r} is no supported {kind}',
                kind=self.input_synopsis,
                __caused_by__=e,
            )
