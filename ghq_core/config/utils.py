from __future__ import annotations

from os import environ
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


def get_gitconfig_items_from_env() -> dict[str, str | tuple[str, ...]]:
    """Parse git-config ENV (``GIT_CONFIG_COUNT|KEY|VALUE``) and return as dict

    Items with multiple values are reported with a ``tuple`` of values, in
    the order in which they were declared.
    """
    items: dict[str, str | tuple[str, ...]] = {}
    count = int(environ.get('GIT_CONFIG_COUNT', '0'))
    for i in range(count):
        key = environ[f'GIT_CONFIG_KEY_{i}']
        val = environ[f'GIT_CONFIG_VALUE_{i}']
        present = items.get(key)
        if present is None:
            items[key] = val
        elif isinstance(present, tuple):
            items[key] = (*present, val)
        else:
            items[key] = (present, val)
    return items


def set_gitconfig_items_in_env(items: Mapping[str, str | tuple[str, ...]]):
    """Set git-config ENV (``GIT_CONFIG_COUNT|KEY|VALUE``) from a mapping

    Any existing declaration in the environment is replaced.
    """
    for i in range(int(environ.get('GIT_CONFIG_COUNT', '0'))):
        environ.pop(f'GIT_CONFIG_KEY_{i}', None)
        environ.pop(f'GIT_CONFIG_VALUE_{i}', None)

    count = 0
    for key, vals in items.items():
        for val in vals if isinstance(vals, tuple) else (vals,):
            environ[f'GIT_CONFIG_KEY_{count}'] = str(key)
            environ[f'GIT_CONFIG_VALUE_{count}'] = str(val)
            count += 1

    if count:
        environ['GIT_CONFIG_COUNT'] = str(count)
    else:
        environ.pop('GIT_CONFIG_COUNT', None)
