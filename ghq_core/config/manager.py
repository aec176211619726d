from __future__ import annotations

from contextlib import contextmanager
from typing import (
    TYPE_CHECKING,
    Any,
)

if TYPE_CHECKING:
    from collections.abc import (
        Generator,
        Hashable,
    )

    from datasalad.settings import Source

from datasalad.settings import (
    Setting,
    Settings,
    UnsetValue,
)

from ghq_core.config.defaults import (
    ImplementationDefaults,
    get_defaults,
)
from ghq_core.config.git import (
    GlobalGitConfig,
    SystemGitConfig,
)
from ghq_core.config.gitenv import GitEnvironment
from ghq_core.config.item import ConfigItem


class ConfigManager(Settings):
    """Multi-source (scope) configuration manager

    By default (``source=None``), a manager utilizes a fixed (order) collection
    of sources (from highest to lowest precedence):

    - ``git-command``: :class:`GitEnvironment`
    - ``git-global``: :class:`GlobalGitConfig`
    - ``git-system``: :class:`SystemGitConfig`
    - ``defaults``: :class:`ImplementationDefaults`

    If a different source collection is desired, it can be given as
    ``sources``.  The ``default`` source will be added to the given sources.
    """

    def __init__(
        self,
        defaults: ImplementationDefaults,
        sources: dict[str, Source] | None = None,
    ):
        if sources is None:
            sources = {
                # Git calls the scope of items from the process environment
                # 'command'
                'git-command': GitEnvironment(),
                'git-global': GlobalGitConfig(),
                'git-system': SystemGitConfig(),
            }
        sources['defaults'] = defaults
        super().__init__(sources)
        # any plain default must come back wrapped in the same item type
        for s in self.sources.values():
            s.item_type = ConfigItem

    def __str__(self) -> str:
        return (
            f'{self.__class__.__name__}('
            # compact display, sources without content are left out
            f'{"<<".join(str(s) for s in self.sources.values() if len(s))}'
            ')'
        )

    def __repr__(self) -> str:
        return (
            f'{self.__class__.__name__}('
            f'{"<<".join(str(s) for s in self.sources.values())}'
            ')'
        )

    @contextmanager
    def overrides(
        self,
        overrides: dict[Hashable, Setting | tuple[Setting, ...]],
    ) -> Generator[ConfigManager]:
        """Context manager to temporarily set configuration overrides

        Internally, these overrides are posted to the ``git-command`` scope,
        hence affect the process environment and newly spawned subprocesses.
        """
        gitcmdsrc = self.sources['git-command']
        with gitcmdsrc.overrides(overrides):
            yield self

    def get(self, key: Hashable, default: Any = None) -> Setting:
        """Return a particular setting identified by its key, or a default

        The composition of the returned setting follows the same rules
        as the access via ``__getitem__``. However, if the effective
        ``pristine_value`` retrieved from any existing configuration is
        ``UnsetValue``, it is update with the given default.
        """
        try:
            val = self[key]
        except KeyError:
            return self._get_default_setting(default)

        if val.pristine_value is UnsetValue:
            val.update(self._get_default_setting(default))
        return val

    def getall_across_sources(
        self,
        key: Hashable,
        *,
        skip_defaults: bool = True,
    ) -> tuple[Setting, ...]:
        """Return all settings for a key, from all sources that have it

        Unlike item access, which reports a single effective setting, this
        collects the values of every source, in the order of source
        precedence. This matches the semantics
        of ``git config --get-all`` across configuration scopes.

        With ``skip_defaults``, the ``defaults`` source is not considered.
        """
        items: list[Setting] = []
        for name, src in self.sources.items():
            if skip_defaults and name == 'defaults':
                continue
            if key in src.keys():
                items.extend(src.getall(key))
        return tuple(items)


__the_manager: ConfigManager | None = None


def get_manager() -> ConfigManager:
    """Return a a process-unique, global `ConfigManager` instance

    This function can be used obtain a :class:`ConfigManager`
    instance for query and manipulation of settings.
    """
    global __the_manager  # noqa: PLW0603
    if __the_manager is None:
        __the_manager = ConfigManager(get_defaults())
    return __the_manager
