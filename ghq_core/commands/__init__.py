"""Components for implementing commands, and the commands themselves

A command is a function that validates its parameters in a particular
way, and yields result dicts that follow particular conventions. The
:func:`ghq_command` decorator establishes these conventions for any
function:

    >>> @ghq_command()
    ... def my_command(some_arg):
    ...     yield {'action': 'demo', 'status': 'ok'}

Parameter validation is customized with a :class:`ParamProcessor`, and
result handling with a :class:`ResultHandler` class.

:func:`get` is the command for cloning or updating working copies.

.. currentmodule:: ghq_core.commands
.. autosummary::
   :toctree: generated

   get
   ghq_command
   ResultHandler
   ResultError
   StandardResultHandler
   PassthroughHandler
   get_default_result_handler
   set_default_result_handler
   ParamProcessor
   JointParamProcessor
   ParamErrors
"""

__all__ = [
    'JointParamProcessor',
    'ParamErrors',
    'ParamProcessor',
    'PassthroughHandler',
    'ResultError',
    'ResultHandler',
    'StandardResultHandler',
    'get',
    'get_default_result_handler',
    'ghq_command',
    'set_default_result_handler',
]


from .decorator import ghq_command
from .default_result_handler import (
    ResultError,
    StandardResultHandler,
    get_default_result_handler,
    set_default_result_handler,
)
from .exceptions import ParamErrors
from .get import get
from .preproc import (
    JointParamProcessor,
    ParamProcessor,
)
from .result_handler import (
    PassthroughHandler,
    ResultHandler,
)
