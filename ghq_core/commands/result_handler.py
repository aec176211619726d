from __future__ import annotations

from abc import (
    ABC,
    abstractmethod,
)
from types import MappingProxyType
from typing import (
    TYPE_CHECKING,
    Any,
)

if TYPE_CHECKING:
    from collections.abc import Callable
    from inspect import Parameter


class ResultHandler(ABC):
    """Abstract base class for result handlers

    A handler is instantiated with the full parameterization of a command
    call (``cmd_kwargs``). Its ``__call__`` receives a fully parameterized,
    argumentless callable that runs the command, and is responsible for
    running it and post-processing whatever it returns.
    """

    def __init__(
        self,
        cmd_kwargs,
    ):
        self._cmd_kwargs = cmd_kwargs

    @classmethod
    def get_extra_kwargs(cls) -> MappingProxyType[str, Parameter]:
        """Returns a mapping with specifications of extra command parameters

        These parameters are added to the signature of any command using
        this handler, and are consumed by the handler itself.
        """
        return MappingProxyType({})

    @abstractmethod
    def __call__(self, producer: Callable) -> Any:
        """Implement to run commands and post-process return values"""


class PassthroughHandler(ResultHandler):
    """Minimal handler that relays any return value unmodified"""

    def __call__(self, producer: Callable) -> Any:
        return producer()
