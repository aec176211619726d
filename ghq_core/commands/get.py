"""Clone or update working copies of remote repositories"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import (
        Generator,
        Iterable,
    )
    from pathlib import Path

    from ghq_core.vcs import VCSBackend

from ghq_core.commands.decorator import ghq_command
from ghq_core.commands.preproc import JointParamProcessor
from ghq_core.constraints import (
    ConstraintError,
    EnsurePath,
    EnsureRemoteReference,
    EnsureVCSBackend,
)
from ghq_core.remote import (
    PathResolver,
    RemoteReference,
)
from ghq_core.runners import (
    CommandError,
    ToolInvocationError,
)
from ghq_core.vcs import (
    CloneOptions,
    ConfigurationError,
    GetOrchestrator,
)

lgr = logging.getLogger('ghq.commands')


@ghq_command(
    preproc=JointParamProcessor(
        {
            'root': EnsurePath(is_format='absolute'),
            'vcs': EnsureVCSBackend(),
        },
    ),
)
def get(
    references: str | RemoteReference | Iterable[str | RemoteReference],
    *,
    root: Path | None = None,
    vcs: VCSBackend | str | None = None,
    branch: str | None = None,
    shallow: bool = False,
    recursive: bool = False,
    ssh: bool | None = None,
    orchestrator: GetOrchestrator | None = None,
) -> Generator[dict]:
    """Clone, or update, working copies of remote repositories

    Each reference is processed independently, in the given order, and
    yields one result. A reference with a working copy is updated, any
    other is cloned to ``<root>/<host>/<owner>/<name>``.

    Parameters
    ----------
    references:
      One or more repository references (URLs or shorthands).
    root: optional
      Absolute path of the root to place working copies under. By default,
      an existing working copy is searched under all configured roots, and
      new ones are placed under the primary root.
    vcs: optional
      Repository kind, instead of an automatic choice.
    branch: optional
      Branch to check out on clone.
    shallow:
      Whether to clone only the most recent history.
    recursive:
      Whether to also clone submodules.
    ssh: optional
      Whether to clone Git remotes via SSH. By default, the ``ghq.ssh`` configuration
      decides.
    orchestrator: optional
      Orchestrator instance to use. ``ssh`` is ignored when given.

    Results
    -------
    ``action`` is ``clone`` or ``update``, and ``get`` when a reference
    could not be processed. ``status`` is ``ok``, ``impossible`` for invalid
    references or an unsupported repository kind, and ``error`` for any
    failure of a clone or update.
    """
    if isinstance(references, (str, RemoteReference)):
        references = [references]
    if orchestrator is None:
        orchestrator = GetOrchestrator(resolver=PathResolver(ssh=ssh))
    options = CloneOptions(branch=branch, shallow=shallow, recursive=recursive)
    ensure_reference = EnsureRemoteReference()

    for reference in references:
        res = {
            'action': 'get',
            'reference': str(reference),
        }
        try:
            outcome = orchestrator.get(
                ensure_reference(reference),
                root=root,
                options=options,
                vcs=vcs,
            )
        except (ConstraintError, ConfigurationError) as e:
            yield dict(res, status='impossible', message=str(e), exception=e)
            continue
        except (OSError, CommandError, ToolInvocationError) as e:
            yield dict(res, status='error', message=str(e), exception=e)
            continue
        yield dict(
            res,
            action=outcome.action.value,
            status='ok',
            path=outcome.path,
            url=outcome.url,
            backend=outcome.backend,
        )
