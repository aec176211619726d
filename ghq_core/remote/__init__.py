"""Repository references and their local working copies

A reference identifies a remote repository, either by a full URL, an
scp-like SSH address (``git@github.com:owner/name.git``), or a shorthand
(``owner/name`` for GitHub, or ``host/owner/name``). References are parsed
into immutable :class:`RemoteReference` instances.

:class:`PathResolver` determines the location of a working copy for a
reference under one of the configured root directories
(see :func:`get_local_roots`).

.. currentmodule:: ghq_core.remote
.. autosummary::
   :toctree: generated

   RemoteReference
   PathResolver
   get_local_roots
   parse_reference
"""

__all__ = [
    'RemoteReference',
    'PathResolver',
    'get_local_roots',
    'parse_reference',
]

from .reference import (
    RemoteReference,
    parse_reference,
)
from .resolver import (
    PathResolver,
    get_local_roots,
)
