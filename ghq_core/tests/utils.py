from __future__ import annotations

import os
from dataclasses import dataclass
from shutil import rmtree as shutil_rmtree
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import (
        Path,
        PurePath,
    )

from ghq_core.runners import (
    call_git,
    iter_git_subproc,
)


@dataclass(frozen=True)
class RecordedCall:
    cmd: list[str]
    cwd: Path | None


class CallRecorder:
    """Runner that records commands instead of executing them

    Instances can be given as ``runner`` to any VCS backend operation.
    If ``fail_with`` is given, this exception is raised after the call
    was recorded.
    """

    def __init__(self, fail_with: Exception | None = None):
        self.calls: list[RecordedCall] = []
        self.fail_with = fail_with

    def __call__(self, cmd: list[str], *, cwd: Path | None = None) -> None:
        self.calls.append(RecordedCall(list(cmd), cwd))
        if self.fail_with is not None:
            raise self.fail_with

    @property
    def last(self) -> RecordedCall:
        return self.calls[-1]


def call_git_addcommit(
    cwd: Path,
    paths: list[str | PurePath] | None = None,
    *,
    msg: str | None = None,
):
    if paths is None:
        paths = ['.']

    if msg is None:
        msg = 'done by call_git_addcommit()'

    call_git(['add'] + [str(p) for p in paths], cwd=cwd, capture_output=True)
    call_git(
        [
            # no reliance on a configured identity
            '-c',
            'user.name=GHQ Tester',
            '-c',
            'user.email=test@example.com',
            'commit',
            '--no-gpg-sign',
            '-m',
            msg,
        ],
        cwd=cwd,
        capture_output=True,
    )


def _rmtree_onerror(func, path, exc_info):  # noqa: ARG001
    """
    Error handler for ``shutil.rmtree``.

    If the error is due to an access error (read only file)
    it attempts to add write permission and then retries.

    If the error is for another reason it re-raises the error.
    """
    import stat

    if not os.access(path, os.W_OK):
        os.chmod(path, stat.S_IWUSR)
        func(path)
    else:
        raise


def rmtree(path: Path) -> None:
    """``shutil.rmtree()`` with an error handler that sets write permissions"""
    shutil_rmtree(
        path,
        # deprecated with PY3.12 -> onexc=
        onerror=_rmtree_onerror,
    )


def git_oneline(args: list[str], *, cwd: Path | None = None) -> str:
    """Return the stripped output of a Git command"""
    with iter_git_subproc(args, cwd=cwd) as proc:
        return b''.join(proc).decode().strip()
