from __future__ import annotations

from contextlib import contextmanager
from typing import (
    TYPE_CHECKING,
)

if TYPE_CHECKING:
    from collections.abc import (
        Collection,
        Generator,
        Hashable,
    )

from datasalad.settings import (
    Setting,
    UnsetValue,
    WritableMultivalueSource,
)

from ghq_core.config.item import ConfigItem
from ghq_core.config.utils import (
    get_gitconfig_items_from_env,
    set_gitconfig_items_in_env,
)


class GitEnvironment(WritableMultivalueSource):
    """Source for Git's environment variable based ``command`` scope

    Items are read from, and written to the ``GIT_CONFIG_COUNT``,
    ``GIT_CONFIG_KEY_<n>``, ``GIT_CONFIG_VALUE_<n>`` variables of the
    process environment. Git itself honors these variables, so any item
    set here is also seen by all Git child processes, including those
    started for cloning and updating repositories.

    The source holds no state of its own, every access inspects the
    process environment. Use :meth:`overrides` for temporary settings.
    """

    item_type = ConfigItem

    def __str__(self) -> str:
        return self.__class__.__name__

    def _reinit(self):
        """Does nothing"""

    def _load(self) -> None:
        """Does nothing"""

    def _get_item(self, key: Hashable) -> Setting:
        val = get_gitconfig_items_from_env()[str(key)]
        if isinstance(val, tuple):
            return self.item_type(val[-1])
        return self.item_type(val)

    def _set_item(self, key: Hashable, value: Setting) -> None:
        env = get_gitconfig_items_from_env()
        env[str(key)] = str(value.value)
        set_gitconfig_items_in_env(env)

    def _del_item(self, key: Hashable) -> None:
        env = get_gitconfig_items_from_env()
        del env[str(key)]
        set_gitconfig_items_in_env(env)

    def _get_keys(self) -> Collection:
        return get_gitconfig_items_from_env().keys()

    def _getall(
        self,
        key: Hashable,
    ) -> tuple[Setting, ...]:
        val = get_gitconfig_items_from_env()[str(key)]
        vals = val if isinstance(val, tuple) else (val,)
        return tuple(self.item_type(v) for v in vals)

    def _setall(self, key: Hashable, values: tuple[Setting, ...]) -> None:
        env = get_gitconfig_items_from_env()
        env[str(key)] = tuple(str(v.value) for v in values)
        set_gitconfig_items_in_env(env)

    @contextmanager
    def overrides(
        self,
        overrides: dict[Hashable, Setting | tuple[Setting, ...]],
    ) -> Generator[None]:
        """Context manager to temporarily set configuration overrides

        A tuple of items sets a multi-value item (e.g., multiple
        ``ghq.root`` declarations). On exit, the previous state of each
        item is restored.
        """
        restore: dict[Hashable, tuple[Setting, ...]] = {}

        for k, v in overrides.items():
            restore[k] = self.getall(k, self.item_type(UnsetValue))
            if isinstance(v, tuple):
                self.setall(k, v)
            else:
                self[k] = v
        try:
            yield
        finally:
            for k, vals in restore.items():
                if len(vals) == 1 and vals[0].pristine_value is UnsetValue:
                    del self[k]
                    continue
                self.setall(k, vals)
