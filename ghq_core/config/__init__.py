"""Configuration management

This module provides the standard facilities for configuration management,
query, and update. It is built on `datasalad.settings
<https://datasalad.readthedocs.io/latest/generated/datasalad.settings.html>`__.

The key piece is the :class:`ConfigManager` that supports querying for
configuration settings across multiple sources: Git's ``command``
(environment), ``global``, and ``system`` scopes, and implementation
defaults. It also offers a context manager to temporarily override
particular configuration items.

Configuration of this package is stored in Git's configuration files,
under the ``ghq`` section. Most importantly, ``ghq.root`` declares the
root directories of all local working copies. It can be given multiple
times, the first value declares the primary root::

    git config --global --add ghq.root ~/src

Usage
-----

No common instance of :class:`~ghq_core.config.ConfigManager` is provided
on import. If and when such a common instance it needed, it must be
obtained by calling :func:`get_manager`. Subsequent calls will return the
same instance.

The same pattern is applied to obtain a common instance of
:class:`ImplementationDefaults` via :func:`get_defaults`.

.. currentmodule:: ghq_core.config
.. autosummary::
   :toctree: generated

   ConfigItem
   ConfigManager
   GitConfig
   SystemGitConfig
   GlobalGitConfig
   GitEnvironment
   ImplementationDefaults
   UnsetValue
   anything2bool
   get_defaults
   get_manager
"""

__all__ = [
    'ConfigItem',
    'ConfigManager',
    'GitConfig',
    'SystemGitConfig',
    'GlobalGitConfig',
    'GitEnvironment',
    'ImplementationDefaults',
    'UnsetValue',
    'anything2bool',
    'get_defaults',
    'get_manager',
]

from datasalad.settings import UnsetValue

from .defaults import (
    ImplementationDefaults,
    anything2bool,
    get_defaults,
)
from .git import (
    GitConfig,
    GlobalGitConfig,
    SystemGitConfig,
)
from .gitenv import GitEnvironment
from .item import ConfigItem
from .manager import (
    ConfigManager,
    get_manager,
)
