from __future__ import annotations

import logging
import re
from abc import abstractmethod
from os import name as os_name
from pathlib import Path
from typing import (
    TYPE_CHECKING,
)

if TYPE_CHECKING:
    from collections.abc import Hashable

    from datasalad.settings import Setting

from datasalad.itertools import (
    decode_bytes,
    itemize,
)
from datasalad.settings import CachingSource

from ghq_core.config.item import ConfigItem
from ghq_core.runners import (
    CommandError,
    call_git,
    iter_git_subproc,
)

lgr = logging.getLogger('ghq.config')


class GitConfig(CachingSource):
    """Abstract base class for sources using git-config to read and write

    Derived classes must implement :meth:`GitConfig._get_git_config_cmd`
    and :meth:`GitConfig._get_git_config_cwd` to support the generic
    :meth:`GitConfig._load` implementation that reads configuration
    items from ``git config``.
    """

    # A repository in the working directory would leak its local
    # configuration into the output. Pointing --git-dir to the null device
    # prevents that.
    _nul = 'b:\\nul' if os_name == 'nt' else '/dev/null'

    def __str__(self) -> str:
        if not self._sources:
            return self.__class__.__name__
        return (
            f'{self.__class__.__name__}['
            f'{",".join(str(s) for s in self._sources)}'
            ']'
        )

    @abstractmethod
    def _get_git_config_cmd(self) -> list[str]:
        """Return git-config base command for a particular config"""

    @abstractmethod
    def _get_git_config_cwd(self) -> Path | None:
        """Return path the git-config command should run in"""

    def _reinit(self) -> None:
        super()._reinit()
        self._sources: set[str | Path] = set()

    def _load(self) -> None:
        cwd = self._get_git_config_cwd() or Path.cwd()
        dct: dict[str, str | tuple[str, ...]] = {}
        fileset: set[str] = set()

        try:
            with iter_git_subproc(
                [*self._get_git_config_cmd(), '--show-origin', '--list', '-z'],
                inputs=None,
                cwd=cwd,
            ) as gitcfg:
                for line in itemize(
                    decode_bytes(gitcfg),
                    sep='\0',
                    keep_ends=False,
                ):
                    _proc_dump_line(line, fileset, dct)
        except CommandError:
            # git-config fails when a scope has no file (e.g., no
            # /etc/gitconfig). That is an empty scope, not an error
            lgr.debug('No configuration read from %s', self, exc_info=True)

        self._sources = {
            Path(f[5:]) if Path(f[5:]).is_absolute() else cwd / f[5:]
            for f in fileset
            if f.startswith('file:')
        }

        for k, v in dct.items():
            vals = (v,) if not isinstance(v, tuple) else v
            self.setall(
                k,
                tuple(ConfigItem(val) for val in vals),
            )

    #
    # all accessors must apply the key normalization of git-config, or
    # we would end up with effective duplicates
    #
    def __contains__(self, key: Hashable) -> bool:
        return _normalize_key(key) in self.keys()

    def _get_item(self, key: Hashable) -> Setting:
        return super()._get_item(_normalize_key(key))

    def _getall(self, key: Hashable) -> tuple[Setting, ...]:
        return super()._getall(_normalize_key(key))

    def _del_item(self, key: Hashable):
        return super()._del_item(_normalize_key(key))

    def _setall(self, key: Hashable, values: tuple[Setting, ...]) -> None:
        super()._setall(_normalize_key(key), values)

    def _set_item(self, key: Hashable, value: Setting) -> None:
        key = _normalize_key(key)
        call_git(
            [*self._get_git_config_cmd(), '--replace-all', key, str(value.value)],
            capture_output=True,
        )
        super()._set_item(key, value)

    def _add(self, key: Hashable, value: Setting) -> None:
        key = _normalize_key(key)
        call_git(
            [*self._get_git_config_cmd(), '--add', key, str(value.value)],
            capture_output=True,
        )
        super()._add(key, value)


class SystemGitConfig(GitConfig):
    """Source for Git's ``system`` configuration scope"""

    def _get_git_config_cmd(self) -> list[str]:
        return [f'--git-dir={self._nul}', 'config', '--system']

    def _get_git_config_cwd(self) -> Path | None:
        return Path.cwd()


class GlobalGitConfig(GitConfig):
    """Source for Git's ``global`` configuration scope

    This is where ``git config --global ghq.root <path>`` puts root
    directory declarations.
    """

    def _get_git_config_cmd(self) -> list[str]:
        return [f'--git-dir={self._nul}', 'config', '--global']

    def _get_git_config_cwd(self) -> Path | None:
        return Path.cwd()


def _proc_dump_line(
    line: str,
    fileset: set[str],
    dct: dict[str, str | tuple[str, ...]],
) -> None:
    # a null-delimited chunk is either an origin declaration, or
    # a key/value record. Output contamination is discarded line by line
    k = None
    v = None
    while line:  # pragma: no cover
        if line.startswith(('file:', 'blob:')):
            fileset.add(line)
            break
        if line.startswith('command line:'):
            break
        k, v = _gitcfg_rec_to_keyvalue(line)
        if k is not None:
            break
        ignore, _, line = line.partition('\n')
        lgr.debug('Non-standard git-config output, ignoring: %s', ignore)
    if not k:
        return
    if v is None:
        # a bare name is git-config's short-hand for a true boolean
        v = 'true'
    present_v = dct.get(k)
    if present_v is None:
        dct[k] = v
    elif isinstance(present_v, tuple):
        dct[k] = (*present_v, v)
    else:
        dct[k] = (present_v, v)


# git-config key syntax with a section and a subsection
# see git-config(1) for syntax details
cfg_k_regex = re.compile(r'([a-zA-Z0-9-.]+\.[^\0\n]+)$', flags=re.MULTILINE)
# identical to the key regex, but with an additional group for a
# value in a null-delimited git-config dump
cfg_kv_regex = re.compile(
    r'([a-zA-Z0-9-.]+\.[^\0\n]+)\n(.*)$', flags=re.MULTILINE | re.DOTALL
)


def _gitcfg_rec_to_keyvalue(rec: str) -> tuple[str | None, str | None]:
    """Split a git-config dump record into key and value

    Key and/or value are ``None`` if not syntax-compliant (key) or
    absent (value).
    """
    kv_match = cfg_kv_regex.match(rec)
    if kv_match:
        k, v = kv_match.groups()
    elif cfg_k_regex.match(rec):
        k, v = rec, None
    else:
        k = v = None
    return k, v


def _normalize_key(key: Hashable) -> str:
    # section and variable name are case-insensitive, subsections are not
    key_l = str(key).split('.')
    if len(key_l) < 2:  # noqa: PLR2004
        return key_l[0].lower()
    section, *subsections, name = key_l
    return '.'.join((section.lower(), *subsections, name.lower()))
