"""Assorted common constants"""

__all__ = [
    'UnsetValue',
    'DEFAULT_HOST',
    'DEFAULT_ROOT',
    'ROOT_CONFIG_KEY',
    'ROOT_ENV_VAR',
]

from datasalad.settings import UnsetValue

DEFAULT_HOST = 'github.com'
"""Host assumed for ``<owner>/<name>`` shorthand references"""

DEFAULT_ROOT = '~/.ghq'
"""Root directory used when no root is configured

``str`` path, to be expanded with ``Path.expanduser()``.
"""

ROOT_CONFIG_KEY = 'ghq.root'
"""Git config key declaring root directories (may be given multiple times)"""

ROOT_ENV_VAR = 'GHQ_ROOT'
"""Environment variable with ``os.pathsep``-separated root directories

If set and non-empty, it takes precedence over any ``ghq.root``
configuration.
"""
