from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ghq_core.config import ConfigManager

from ghq_core.config import get_manager
from ghq_core.consts import (
    ROOT_CONFIG_KEY,
    ROOT_ENV_VAR,
)
from ghq_core.remote.reference import (
    RemoteReference,
    parse_reference,
)

lgr = logging.getLogger('ghq.remote')


def get_local_roots(manager: ConfigManager | None = None) -> list[Path]:
    """Return all configured root directories, the primary root first

    Roots are determined by the first of these that declares any:

    - the ``GHQ_ROOT`` environment variable, multiple roots separated by
      ``os.pathsep``
    - all ``ghq.root`` configuration items, across configuration sources
      in the order of their precedence
    - the implementation default (``~/.ghq``)

    Each root is user-expanded and made absolute. Duplicates are reported
    only once, at their first position.
    """
    from_env = os.environ.get(ROOT_ENV_VAR)
    if from_env:
        candidates = [r for r in from_env.split(os.pathsep) if r]
    else:
        if manager is None:
            manager = get_manager()
        candidates = [
            str(item.value)
            for item in manager.getall_across_sources(ROOT_CONFIG_KEY)
        ]
        if not candidates:
            candidates = [str(manager[ROOT_CONFIG_KEY].value)]

    roots: list[Path] = []
    for c in candidates:
        root = Path(c).expanduser().absolute()
        if root not in roots:
            roots.append(root)
    return roots


class PathResolver:
    """Map repository references to remote URLs and local working copies

    Working copies are laid out as ``<root>/<host>/<segment>/.../<name>``,
    see :attr:`RemoteReference.local_segments`.

    Parameters
    ----------
    roots: optional
      Root directories, the first one is the primary root. By default,
      roots are determined with :func:`get_local_roots` on demand.
    ssh: optional
      If ``True``, all resolved references point to the SSH form of a
      remote URL (``ssh://git@<host>/<path>``). By default, the
      ``ghq.ssh`` configuration decides.
    """

    def __init__(
        self,
        roots: Iterable[Path | str] | None = None,
        *,
        ssh: bool | None = None,
    ):
        self._roots = (
            None
            if roots is None
            else [Path(r).expanduser().absolute() for r in roots]
        )
        if self._roots is not None and not self._roots:
            msg = 'at least one root directory is required'
            raise ValueError(msg)
        self._ssh = ssh

    def __repr__(self) -> str:
        return (
            f'{self.__class__.__name__}(roots={self._roots!r}, ssh={self._ssh!r})'
        )

    @property
    def roots(self) -> list[Path]:
        """Root directories, the primary root first"""
        if self._roots is None:
            return get_local_roots()
        return list(self._roots)

    @property
    def primary_root(self) -> Path:
        """The root that new working copies are placed under by default"""
        return self.roots[0]

    @property
    def ssh(self) -> bool:
        if self._ssh is None:
            return get_manager().get('ghq.ssh', False).value
        return self._ssh

    def resolve(
        self,
        reference: str | RemoteReference,
        *,
        ssh: bool | None = None,
    ) -> RemoteReference:
        """Normalize a reference, and rewrite it to SSH if configured

        ``ssh`` overrides the resolver's SSH setting for this call.
        """
        ref = (
            reference
            if isinstance(reference, RemoteReference)
            else parse_reference(reference)
        )
        if self.ssh if ssh is None else ssh:
            ref = ref.as_ssh()
        return ref

    def local_path(
        self,
        reference: str | RemoteReference,
        root: Path | str | None = None,
    ) -> Path:
        """Return the path of the working copy for a reference

        If no ``root`` is given, the primary root is used. The mapping is
        purely computational, the returned path need not exist.
        """
        ref = self.resolve(reference)
        base = self.primary_root if root is None else Path(root)
        return base.joinpath(*ref.local_segments)

    def find_root(self, reference: str | RemoteReference) -> Path:
        """Return the root a working copy for a reference should live in

        This is the first root under which a directory for the reference
        already exists, or the primary root.
        """
        ref = self.resolve(reference)
        roots = self.roots
        for root in roots:
            if root.joinpath(*ref.local_segments).is_dir():
                lgr.debug('Found existing directory for %s under %s', ref, root)
                return root
        return roots[0]
