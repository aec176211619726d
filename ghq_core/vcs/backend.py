from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import (
    TYPE_CHECKING,
    Protocol,
)

if TYPE_CHECKING:
    from ghq_core.remote import RemoteReference

from ghq_core.runners import call_vcs
from ghq_core.vcs.exceptions import (
    ConfigurationError,
    FilesystemError,
)

lgr = logging.getLogger('ghq.vcs')


class Runner(Protocol):
    """Signature of a callable that executes a command

    Must raise when the command cannot be started, or exits non-zero.
    :func:`~ghq_core.runners.call_vcs` is the standard implementation.
    """

    def __call__(self, cmd: list[str], *, cwd: Path | None = None) -> None: ...


# TODO: Could be `StrEnum`, came with PY3.11
class VCSBackend(Enum):
    """Enumeration of supported version control systems

    Each member translates the uniform :meth:`clone` and :meth:`update`
    operations into an invocation of its external tool. Options a tool
    does not support (see :meth:`supports`) are silently ignored.

    ==============  ========================  ======================
    Member          Clone                     Update
    ==============  ========================  ======================
    ``git``         ``git clone``             ``git pull --ff-only``
    ``subversion``  ``svn checkout``          ``svn update``
    ``gitsvn``      ``git svn clone``         ``git svn rebase``
    ``mercurial``   ``hg clone``              ``hg pull --update``
    ==============  ========================  ======================
    """

    git = 'git'
    subversion = 'subversion'
    gitsvn = 'gitsvn'
    mercurial = 'mercurial'

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> VCSBackend:
        """Return the backend for a repository kind name, or an alias

        Raises
        ------
        ConfigurationError
          for an unknown name.
        """
        try:
            return _backend_aliases[name.lower()]
        except KeyError as e:
            msg = (
                f'unsupported repository kind {name!r}, '
                f'choose from {sorted(_backend_aliases)!r}'
            )
            raise ConfigurationError(msg) from e

    @property
    def executable(self) -> str:
        """Name of the external tool"""
        return _executables[self]

    @property
    def marker(self) -> str:
        """Name of the metadata directory inside a working copy"""
        return _markers[self]

    def supports(self, option: str) -> bool:
        """Whether ``branch``, ``shallow``, or ``recursive`` is supported"""
        return option in _clone_options[self]

    def is_working_copy(self, path: Path | str) -> bool:
        """Whether ``path`` looks like a working copy of this kind"""
        return (Path(path) / self.marker).exists()

    def clone_args(
        self,
        remote: RemoteReference | str,
        local: Path | str,
        *,
        branch: str | None = None,
        shallow: bool = False,
        recursive: bool = False,
    ) -> list[str]:
        """Return the full clone command, the executable first

        An empty ``branch`` counts as no branch. Option flags precede the
        positional arguments, in the order branch, depth, recursive.
        """
        cmd = [self.executable, *_clone_cmds[self]]
        if branch and self.supports('branch'):
            cmd.extend(('--branch', branch))
        if shallow and self.supports('shallow'):
            cmd.extend(('--depth', '1'))
        if recursive and self.supports('recursive'):
            cmd.append('--recursive')
        cmd.extend((str(remote), str(local)))
        return cmd

    def update_args(self) -> list[str]:
        """Return the full update command, the executable first"""
        return [self.executable, *_update_cmds[self]]

    def clone(
        self,
        remote: RemoteReference | str,
        local: Path | str,
        *,
        branch: str | None = None,
        shallow: bool = False,
        recursive: bool = False,
        runner: Runner = call_vcs,
    ) -> None:
        """Create a working copy of ``remote`` at ``local``

        All parent directories of ``local`` are created first. The clone
        command then runs in the working directory of the calling process.

        Raises
        ------
        FilesystemError
          if the parent directory of ``local`` cannot be created. The tool
          is not invoked in this case.
        ToolInvocationError, ToolExecutionError
          if the tool cannot be started, or fails (with the standard
          runner).
        """
        local = Path(local)
        ensure_parent_dir(local)
        lgr.info('Clone %s to %s (%s)', remote, local, self)
        runner(
            self.clone_args(
                remote,
                local,
                branch=branch,
                shallow=shallow,
                recursive=recursive,
            )
        )

    def update(
        self,
        local: Path | str,
        *,
        runner: Runner = call_vcs,
    ) -> None:
        """Update the working copy at ``local`` from its remote

        The update command runs inside ``local``.
        """
        local = Path(local)
        lgr.info('Update %s (%s)', local, self)
        runner(self.update_args(), cwd=local)


_executables = {
    VCSBackend.git: 'git',
    VCSBackend.subversion: 'svn',
    VCSBackend.gitsvn: 'git',
    VCSBackend.mercurial: 'hg',
}

_markers = {
    VCSBackend.git: '.git',
    VCSBackend.subversion: '.svn',
    # git-svn clones are regular Git repositories
    VCSBackend.gitsvn: '.git',
    VCSBackend.mercurial: '.hg',
}

_clone_cmds = {
    VCSBackend.git: ('clone',),
    VCSBackend.subversion: ('checkout',),
    VCSBackend.gitsvn: ('svn', 'clone'),
    VCSBackend.mercurial: ('clone',),
}

_update_cmds = {
    VCSBackend.git: ('pull', '--ff-only'),
    VCSBackend.subversion: ('update',),
    VCSBackend.gitsvn: ('svn', 'rebase'),
    VCSBackend.mercurial: ('pull', '--update'),
}

_clone_options = {
    VCSBackend.git: frozenset(('branch', 'shallow', 'recursive')),
    VCSBackend.subversion: frozenset(('shallow',)),
    VCSBackend.gitsvn: frozenset(),
    VCSBackend.mercurial: frozenset(),
}

_backend_aliases = {
    'git': VCSBackend.git,
    'github': VCSBackend.git,
    'svn': VCSBackend.subversion,
    'subversion': VCSBackend.subversion,
    'git-svn': VCSBackend.gitsvn,
    'gitsvn': VCSBackend.gitsvn,
    'hg': VCSBackend.mercurial,
    'mercurial': VCSBackend.mercurial,
}


def ensure_parent_dir(path: Path) -> None:
    """Create all missing parent directories of ``path``

    Raises
    ------
    FilesystemError
      if a directory cannot be created. The path of the parent directory
      is reported as the ``filename`` of the exception.
    """
    parent = path.parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemError(
            e.errno,
            f'cannot create directory: {e.strerror or e}',
            str(parent),
        ) from e
