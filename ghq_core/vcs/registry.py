from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ghq_core.remote import RemoteReference

from ghq_core.vcs.backend import VCSBackend
from ghq_core.vcs.exceptions import ConfigurationError

lgr = logging.getLogger('ghq.vcs')

known_hosts = MappingProxyType(
    {
        'github.com': VCSBackend.git,
        'gist.github.com': VCSBackend.git,
        'gitlab.com': VCSBackend.git,
        'codeberg.org': VCSBackend.git,
        'hg.mozilla.org': VCSBackend.mercurial,
        'svn.apache.org': VCSBackend.subversion,
    }
)
"""Hosts that serve repositories of a single kind only"""

known_schemes = MappingProxyType(
    {
        'git': VCSBackend.git,
        'git+ssh': VCSBackend.git,
        'svn': VCSBackend.subversion,
        'svn+ssh': VCSBackend.subversion,
    }
)
"""URL schemes that imply a particular kind of repository"""

known_suffixes = MappingProxyType(
    {
        '.git': VCSBackend.git,
    }
)
"""Suffixes of the last URL path segment that imply a repository kind"""


class BackendRegistry:
    """Select the VCS backend for a remote repository reference

    The first match of the following rules decides:

    1. an explicit override given to :meth:`select`
    2. the URL scheme (e.g., ``svn+ssh``)
    3. the host (e.g., ``hg.mozilla.org``)
    4. the suffix of the last path segment (e.g., ``.git``)
    5. the ``default``

    Custom ``hosts``, ``schemes``, and ``suffixes`` rules amend, or replace,
    the built-in ones. With ``default=None``, a reference that matches no
    rule causes a :class:`ConfigurationError`.

    A registry is immutable.
    """

    def __init__(
        self,
        *,
        hosts: Mapping[str, VCSBackend] | None = None,
        schemes: Mapping[str, VCSBackend] | None = None,
        suffixes: Mapping[str, VCSBackend] | None = None,
        default: VCSBackend | None = VCSBackend.git,
    ):
        self._hosts = _merge_rules(known_hosts, hosts)
        self._schemes = _merge_rules(known_schemes, schemes)
        # suffixes are matched case-sensitively
        self._suffixes = MappingProxyType({**known_suffixes, **(suffixes or {})})
        self._default = default

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(default={self._default!r})'

    @property
    def default(self) -> VCSBackend | None:
        return self._default

    def select(
        self,
        reference: RemoteReference,
        vcs: VCSBackend | str | None = None,
    ) -> VCSBackend:
        """Return the backend for a reference

        ``vcs`` overrides all rules. It can be a :class:`VCSBackend` or
        a name accepted by :meth:`VCSBackend.from_name`.

        Raises
        ------
        ConfigurationError
          for an unknown ``vcs`` name, or when no rule matches and the
          registry has no default.
        """
        backend, rule = self._match(reference, vcs)
        if backend is None:
            msg = f'unsupported repository kind, no VCS backend for {reference}'
            raise ConfigurationError(msg)
        lgr.debug('Selected %s backend for %s (%s)', backend, reference, rule)
        return backend

    def _match(
        self,
        reference: RemoteReference,
        vcs: VCSBackend | str | None,
    ) -> tuple[VCSBackend | None, str]:
        if vcs is not None:
            return (
                vcs if isinstance(vcs, VCSBackend) else VCSBackend.from_name(vcs),
                'override',
            )
        if reference.scheme in self._schemes:
            return self._schemes[reference.scheme], 'scheme'
        # a port is no part of the host identity
        hostname = reference.host.split(':', 1)[0]
        if hostname in self._hosts:
            return self._hosts[hostname], 'host'
        name = reference.path[-1]
        for suffix, backend in self._suffixes.items():
            if name.endswith(suffix):
                return backend, 'suffix'
        return self._default, 'default'


def _merge_rules(
    builtin: Mapping[str, VCSBackend],
    custom: Mapping[str, VCSBackend] | None,
) -> Mapping[str, VCSBackend]:
    rules = dict(builtin)
    if custom:
        rules.update((k.lower(), v) for k, v in custom.items())
    return MappingProxyType(rules)
