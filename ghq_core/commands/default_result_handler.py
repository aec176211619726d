from __future__ import annotations

import logging
from inspect import Parameter
from types import MappingProxyType
from typing import (
    TYPE_CHECKING,
    Any,
)

if TYPE_CHECKING:
    from collections.abc import (
        Callable,
        Generator,
    )

from ghq_core.commands.result_handler import ResultHandler
from ghq_core.constraints import EnsureChoice

lgr = logging.getLogger('ghq.commands')

failure_modes = EnsureChoice('continue', 'stop', 'ignore')

failure_status = ('impossible', 'error')


class ResultError(RuntimeError):
    """Exception raised when error results have been observed

    All failed results are available as :attr:`failed`.
    """

    def __init__(self, failed=None, msg=None):
        super().__init__(msg)
        self.failed = failed


class StandardResultHandler(ResultHandler):
    """Result handler commonly used by commands

    A command must return an iterable (typically a generator) of result
    dicts. Each result has at least an ``action`` and a ``status`` key.
    ``None`` results, and results without an ``action`` are skipped.

    Each result is logged (logger ``ghq.commands``) and yielded.
    Results with status ``impossible`` or ``error`` are failures, and the
    extra ``on_failure`` parameter declares how to deal with them:

    - ``continue``: yield all results, raise :class:`ResultError` at the end
    - ``stop``: raise :class:`ResultError` at the first failure, without
      yielding it
    - ``ignore``: yield all results, never raise
    """

    @classmethod
    def get_extra_kwargs(cls) -> MappingProxyType[str, Parameter]:
        kwargs = {
            'on_failure': Parameter(
                name='on_failure',
                kind=Parameter.KEYWORD_ONLY,
                default='continue',
                annotation=str,
            ),
        }
        return MappingProxyType(kwargs)

    def __call__(self, producer: Callable):
        # check before anything runs
        on_failure = failure_modes(self._cmd_kwargs['on_failure'])
        error_results: list[dict] = []

        for res in producer():
            if not res or 'action' not in res:
                continue

            self.log_result(res)

            if on_failure != 'ignore' and res['status'] in failure_status:
                error_results.append(res)
                if on_failure == 'stop':
                    break

            yield from self.transform_result(res)

        if error_results:
            msg = (
                'Command did not complete successfully, '
                f'{len(error_results)} failed result(s)'
            )
            raise ResultError(failed=error_results, msg=msg)

    def log_result(self, result: dict) -> None:
        """Log a result at a level matching its status"""
        level = logging.ERROR if result['status'] in failure_status else logging.DEBUG
        lgr.log(
            level,
            '%s(%s): %s%s',
            result['action'],
            result['status'],
            result.get('path', result.get('reference', '')),
            f" [{result['message']}]" if result.get('message') else '',
        )

    def transform_result(self, res) -> Generator[Any, None, None]:
        yield res


__the_default_result_handler_class: type[ResultHandler] = StandardResultHandler


def set_default_result_handler(handler_cls: type[ResultHandler]):
    """Set a default result handler class for use by ``@ghq_command``

    This must be a class implementing the :class:`ResultHandler` interface.
    """
    global __the_default_result_handler_class  # noqa: PLW0603
    __the_default_result_handler_class = handler_cls


def get_default_result_handler() -> type[ResultHandler]:
    """Get the default result handler class used by ``@ghq_command``"""
    return __the_default_result_handler_class
