from __future__ import annotations

from pathlib import Path
from typing import (
    TYPE_CHECKING,
    Any,
)

if TYPE_CHECKING:
    from collections.abc import Callable

from ghq_core.constraints.constraint import Constraint


class EnsurePath(Constraint):
    """Convert input to a ``Path`` and ensure select properties

    Parameters
    ----------
    is_format: {'absolute', 'relative'} or None
      If not None, the path must be absolute, or relative.
    lexists:
      If not None, the path must (or must not) exist. A symlink need not
      point to an existing path to exist.
    is_mode:
      If set, this callable receives the path's ``lstat().st_mode``, and the
      path is rejected if the return value is falsy. ``stat.S_ISDIR`` is a
      typical example.
    expanduser:
      Whether to expand a leading ``~``, like a shell would.
    """

    def __init__(
        self,
        *,
        is_format: str | None = None,
        lexists: bool | None = None,
        is_mode: Callable | None = None,
        expanduser: bool = True,
    ) -> None:
        super().__init__()
        if is_format not in (None, 'absolute', 'relative'):
            msg = f'unrecognized `is_format` label: {is_format}'
            raise ValueError(msg)
        self._is_format = is_format
        self._lexists = lexists
        self._is_mode = is_mode
        self._expanduser = expanduser

    def __call__(self, value: Any) -> Path:
        try:
            path = Path(value)
        except TypeError as e:
            self.raise_for(value, str(e))
        if self._expanduser:
            path = path.expanduser()

        if self._is_format == 'absolute' and not path.is_absolute():
            self.raise_for(path, 'is not an absolute path')
        if self._is_format == 'relative' and path.is_absolute():
            self.raise_for(path, 'is not a relative path')

        mode = None
        if self._lexists is not None or self._is_mode is not None:
            try:
                mode = path.lstat().st_mode
            except FileNotFoundError:
                mode = None
        if self._lexists and mode is None:
            self.raise_for(path, 'does not exist')
        if self._lexists is False and mode is not None:
            self.raise_for(path, 'does (already) exist')
        if self._is_mode is not None and (mode is None or not self._is_mode(mode)):
            self.raise_for(path, 'does not match desired mode')
        return path

    @property
    def input_synopsis(self):
        return '{}{}path'.format(
            {True: 'existing ', False: 'non-existing '}.get(self._lexists, ''),
            f'{self._is_format} ' if self._is_format else '',
        )
