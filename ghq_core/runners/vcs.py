from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from ghq_core.runners.exceptions import (
    ToolExecutionError,
    ToolInvocationError,
)

lgr = logging.getLogger('ghq.runners')


def call_vcs(
    cmd: list[str],
    *,
    cwd: Path | None = None,
    capture_output: bool = False,
) -> None:
    """Run an external VCS tool, raises on failure

    ``cmd`` is the full command, the executable (e.g., ``git``, ``svn``,
    ``hg``) comes first.

    If ``cwd`` is not None, the tool runs with this directory as its
    working directory. The working directory of the calling process is
    not changed.

    By default, the tool's output is not captured, but goes to the terminal
    of the calling process. This is the desired behavior for long-running
    clones that report progress. With ``capture_output``, stdout and stderr
    are captured and attached to a raised :class:`ToolExecutionError`.

    Raises
    ------
    ToolInvocationError
      if the tool cannot be started.
    ToolExecutionError
      if the tool exits with a non-zero status.
    FileNotFoundError, NotADirectoryError
      if the given ``cwd`` does not exist or is not a directory.
    """
    lgr.info('Run %s', ' '.join(cmd))
    try:
        subprocess.run(
            cmd,
            cwd=cwd,
            check=True,
            capture_output=capture_output,
        )
    except subprocess.CalledProcessError as e:
        raise ToolExecutionError(
            cmd=cmd,
            returncode=e.returncode,
            stdout=e.stdout,
            stderr=e.stderr,
            cwd=cwd,
        ) from e
    except OSError as e:
        # subprocess reports a missing working directory the same way as
        # a missing executable. Only the latter is an invocation error
        if cwd is not None and not Path(cwd).is_dir():
            raise
        raise ToolInvocationError(cmd[0], cmd) from e
