from __future__ import annotations

import re
from dataclasses import (
    dataclass,
    replace,
)
from urllib.parse import urlsplit

from ghq_core.consts import DEFAULT_HOST

# scp-like syntax understood by Git and Mercurial: [user@]host:path
# no scheme, and no slash before the colon
_scp_like_regex = re.compile(
    r'^(?:(?P<user>[^@/:]+)@)?(?P<host>[^@/:]+):(?P<path>.+)$'
)

# components that would take a working copy outside of its root
_relative_segments = ('.', '..')

# schemes that connect via SSH already
_ssh_schemes = ('ssh', 'git+ssh', 'svn+ssh')


@dataclass(frozen=True)
class RemoteReference:
    """Parsed identifier of a remote repository

    Instances are normally created with :func:`parse_reference`. A
    reference always has a host and at least two path segments (typically
    owner and name), otherwise ``ValueError`` is raised on construction.
    """

    scheme: str
    """URL scheme, e.g. ``https`` or ``ssh``"""
    host: str
    """Lower-case host name, including a port, if any"""
    path: tuple[str, ...]
    """Path segments, without empty segments"""
    user: str | None = None
    """User name to connect as, if any"""

    def __post_init__(self):
        if not self.host:
            msg = f'remote repository reference without a host: {self.path!r}'
            raise ValueError(msg)
        if len(self.path) < 2:  # noqa: PLR2004
            msg = (
                'remote repository reference needs at least two path '
                f'segments (owner/name), got {self.path!r}'
            )
            raise ValueError(msg)
        for segment in (self.host, *self.path):
            if segment in _relative_segments:
                msg = (
                    'remote repository reference with relative path '
                    f'component {segment!r}: {self.path!r}'
                )
                raise ValueError(msg)

    def __str__(self) -> str:
        return self.url

    @property
    def url(self) -> str:
        """Full URL of the remote repository"""
        netloc = f'{self.user}@{self.host}' if self.user else self.host
        return f'{self.scheme}://{netloc}/{"/".join(self.path)}'

    @property
    def local_segments(self) -> tuple[str, ...]:
        """Components of the path of a working copy relative to a root

        This is the host followed by all path segments, with a ``.git``
        suffix removed from the last segment. A working copy of
        ``https://github.com/owner/name.git`` is laid out at
        ``github.com/owner/name``, just like one of
        ``https://github.com/owner/name``.
        """
        *head, name = self.path
        if name.endswith('.git') and len(name) > len('.git'):
            name = name[: -len('.git')]
        return (self.host, *head, name)

    def as_ssh(self) -> RemoteReference:
        """Return a copy that points to the same repository via SSH

        Any declared user is kept, and ``git`` is used otherwise. A
        reference with an SSH scheme (``ssh``, ``git+ssh``, ``svn+ssh``)
        is returned unchanged.
        """
        if self.scheme in _ssh_schemes:
            return self
        return replace(self, scheme='ssh', user=self.user or 'git')


def parse_reference(reference: str) -> RemoteReference:
    """Parse a user-supplied repository reference

    Supported forms are:

    - full URL, e.g. ``https://github.com/owner/name`` or
      ``svn+ssh://svn.example.com/project/trunk``
    - scp-like SSH address, e.g. ``git@github.com:owner/name.git``,
      which is normalized to an ``ssh://`` URL
    - ``<host>/<owner>/<name>`` shorthand, the first segment must contain
      a dot to be recognized as a host, the URL scheme is ``https``
    - ``<owner>/<name>`` shorthand, for a repository on GitHub

    Raises ``ValueError`` for anything that does not yield a host and at
    least two path segments.
    """
    ref = reference.strip()
    if not ref:
        msg = 'empty remote repository reference'
        raise ValueError(msg)

    if '://' in ref:
        parts = urlsplit(ref)
        user, _, host = parts.netloc.rpartition('@')
        return RemoteReference(
            scheme=parts.scheme.lower(),
            host=host.lower(),
            path=_split_path(parts.path),
            user=user or None,
        )

    scp_match = _scp_like_regex.match(ref)
    if scp_match:
        return RemoteReference(
            scheme='ssh',
            host=scp_match['host'].lower(),
            path=_split_path(scp_match['path']),
            user=scp_match['user'],
        )

    segments = _split_path(ref)
    if len(segments) > 2 and '.' in segments[0]:  # noqa: PLR2004
        return RemoteReference(
            scheme='https',
            host=segments[0].lower(),
            path=segments[1:],
        )
    return RemoteReference(
        scheme='https',
        host=DEFAULT_HOST,
        path=segments,
    )


def _split_path(path: str) -> tuple[str, ...]:
    return tuple(s for s in path.split('/') if s)
