from __future__ import annotations

import logging
import os
import subprocess
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

from datasalad.runners import (
    CommandError,
    iter_subproc,
)

lgr = logging.getLogger('ghq.runners')


def _call_git(
    args: list[str],
    *,
    capture_output: bool = False,
    cwd: Path | None = None,
    check: bool = False,
    force_c_locale: bool = False,
) -> subprocess.CompletedProcess:
    """Wrapper around ``subprocess.run`` for calling Git

    ``args`` must not contain the Git executable itself, it is prepended
    unconditionally.

    With ``force_c_locale``, the Git process runs with ``LC_ALL=C`` to
    get locale-invariant output.
    """
    env = None
    if force_c_locale:
        env = dict(os.environ, LC_ALL='C')

    cmd = ['git', *args]
    lgr.debug('Run %r (cwd=%s)', cmd, cwd)
    try:
        return subprocess.run(
            cmd,
            capture_output=capture_output,
            cwd=cwd,
            check=check,
            env=env,
        )
    except subprocess.CalledProcessError as e:
        # normalize to the package-wide standard
        raise CommandError(
            cmd=cmd,
            returncode=e.returncode,
            stdout=e.stdout,
            stderr=e.stderr,
            cwd=cwd,
        ) from e


def call_git(
    args: list[str],
    *,
    cwd: Path | None = None,
    force_c_locale: bool = False,
    capture_output: bool = False,
) -> None:
    """Call Git with no output capture, raises on non-zero exit.

    If ``cwd`` is not None, the command is executed in this directory.

    If ``capture_output`` is ``True``, process output is captured. This is
    necessary for reporting any error messaging via a ``CommandError``
    exception.
    """
    _call_git(
        args,
        capture_output=capture_output,
        cwd=cwd,
        check=True,
        force_c_locale=force_c_locale,
    )


def iter_git_subproc(args: list[str], **kwargs):
    """``iter_subproc()`` wrapper for calling Git commands

    All argument semantics are identical to those of ``iter_subproc()``,
    except that ``args`` must not contain the Git binary.
    """
    return iter_subproc(['git', *args], **kwargs)
