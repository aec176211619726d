from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from ghq_core.remote import RemoteReference
    from ghq_core.vcs.backend import Runner

from ghq_core.remote import PathResolver
from ghq_core.runners import call_vcs
from ghq_core.vcs.backend import VCSBackend
from ghq_core.vcs.registry import BackendRegistry

lgr = logging.getLogger('ghq.vcs')


@dataclass(frozen=True)
class CloneOptions:
    """Clone-time options, passed on to a backend unchanged"""

    branch: str | None = None
    """Branch to check out, instead of the remote's default branch"""
    shallow: bool = False
    """Whether to limit the clone to the most recent history"""
    recursive: bool = False
    """Whether to also clone submodules"""


# TODO: Could be `StrEnum`, came with PY3.11
class GetAction(Enum):
    """Enumeration of the operations performed by the orchestrator"""

    clone = 'clone'
    update = 'update'


@dataclass(frozen=True)
class GetOutcome:
    """Report on a completed :meth:`GetOrchestrator.get`"""

    action: GetAction
    backend: VCSBackend
    url: str
    path: Path


class GetOrchestrator:
    """Clone a remote repository, or update an existing working copy

    All collaborators are injected. By default, a :class:`PathResolver`
    with configured roots, the standard :class:`BackendRegistry`, and
    :func:`~ghq_core.runners.call_vcs` are used. An orchestrator holds no
    state that changes across :meth:`get` calls.
    """

    def __init__(
        self,
        resolver: PathResolver | None = None,
        registry: BackendRegistry | None = None,
        runner: Runner = call_vcs,
    ):
        self.resolver = resolver or PathResolver()
        self.registry = registry or BackendRegistry()
        self.runner = runner

    def get(
        self,
        reference: str | RemoteReference,
        *,
        root: Path | None = None,
        options: CloneOptions | None = None,
        vcs: VCSBackend | str | None = None,
    ) -> GetOutcome:
        """Clone or update the working copy for ``reference``

        If the working copy (under ``root``, or the root found by
        :meth:`PathResolver.find_root`) carries the selected backend's
        marker, it is updated. Otherwise the remote is cloned with the
        given ``options``. Options do not apply to an update.

        Exactly one backend operation is performed. Any error is
        propagated unchanged.
        """
        if options is None:
            options = CloneOptions()
        # the backend is chosen by the reference as given, the SSH
        # rewrite only applies to Git remotes
        ref = self.resolver.resolve(reference, ssh=False)
        backend = self.registry.select(ref, vcs)
        if backend is VCSBackend.git:
            ref = self.resolver.resolve(ref)
        if root is None:
            root = self.resolver.find_root(ref)
        local = self.resolver.local_path(ref, root=root)

        if backend.is_working_copy(local):
            lgr.debug('Found %s marker in %s', backend.marker, local)
            backend.update(local, runner=self.runner)
            action = GetAction.update
        else:
            backend.clone(
                ref.url,
                local,
                branch=options.branch,
                shallow=options.shallow,
                recursive=options.recursive,
                runner=self.runner,
            )
            action = GetAction.clone
        return GetOutcome(
            action=action,
            backend=backend,
            url=ref.url,
            path=local,
        )
