from __future__ import annotations

from functools import (
    partial,
    wraps,
)
from inspect import (
    Parameter,
    signature,
)
from typing import (
    TYPE_CHECKING,
    Any,
)

from ghq_core.commands.default_result_handler import get_default_result_handler

if TYPE_CHECKING:
    from ghq_core.commands.preproc import ParamProcessor
    from ghq_core.commands.result_handler import ResultHandler


class ghq_command:  # noqa: N801
    """Wrap a callable with parameter preprocessing and result post-processing

    The wrapped callable must not have positional-only parameters.

    On each call, the parameters are first joined into a single mapping,
    and passed through the optional ``preproc`` (a :class:`ParamProcessor`)
    for validation and coercion. The wrapped callable is then run by an
    instance of ``postproc_cls`` (a :class:`ResultHandler`, by default the
    one reported by :func:`get_default_result_handler`), created for this
    particular parameterization.

    A result handler can declare extra keyword-only parameters (e.g.,
    ``on_failure``). They are added to the signature of the wrapped
    callable, and consumed by the handler. ``extra_kwarg_defaults`` can
    override their default values for a particular command.

    All decorator parameters are attached to the returned callable as
    attributes of the same name.
    """

    def __init__(
        self,
        *,
        preproc: ParamProcessor | None = None,
        postproc_cls: type[ResultHandler] | None = None,
        extra_kwarg_defaults: dict[str, Any] | None = None,
    ):
        self.preproc = preproc
        self.postproc_cls = postproc_cls or get_default_result_handler()
        self.extra_kwargs_defaults = extra_kwarg_defaults or {}

    def __call__(self, wrapped):
        extra_kwarg_specs = self.postproc_cls.get_extra_kwargs()

        @wraps(wrapped)
        def command_wrapper(*args, **kwargs):
            kwargs = update_with_extra_kwargs(
                extra_kwarg_specs,
                self.extra_kwargs_defaults,
                **kwargs,
            )
            allkwargs, params_at_default = get_allargs_as_kwargs(
                wrapped,
                args,
                kwargs,
                extra_kwarg_specs,
            )
            if self.preproc is not None:
                allkwargs = self.preproc(
                    allkwargs,
                    at_default=params_at_default,
                )
            result_handler = self.postproc_cls(
                cmd_kwargs=allkwargs,
            )
            # the handler receives an argumentless callable, extra
            # kwargs are not for the command
            return result_handler(
                partial(
                    wrapped,
                    **{
                        k: v for k, v in allkwargs.items() if k not in extra_kwarg_specs
                    },
                ),
            )

        sig = signature(wrapped)
        command_wrapper.__signature__ = sig.replace(
            parameters=(
                *sig.parameters.values(),
                *extra_kwarg_specs.values(),
            ),
        )
        command_wrapper.preproc = self.preproc
        command_wrapper.extra_kwargs_defaults = self.extra_kwargs_defaults
        command_wrapper.postproc_cls = self.postproc_cls
        return command_wrapper


def update_with_extra_kwargs(
    handler_kwarg_specs: dict[str, Parameter],
    deco_kwargs: dict[str, Any],
    **call_kwargs,
) -> dict[str, Any]:
    """Return command kwargs, amended with all extra kwargs of a handler

    For each extra kwarg, an explicitly given value wins over a default
    given to the decorator, which wins over the handler's default.
    """
    return dict(
        call_kwargs,
        **{
            p_name: call_kwargs.get(
                p_name,
                deco_kwargs.get(p_name, param.default),
            )
            for p_name, param in handler_kwarg_specs.items()
        },
    )


def get_allargs_as_kwargs(call, args, kwargs, extra_kwarg_specs):
    """Generate a kwargs dict from a call signature and actual parameters

    Returns a mapping of all parameter names to their values, and the set
    of names of the parameters whose value equals the declared default.

    Raises ``TypeError`` for missing required arguments, like Python would.
    """
    params = dict(signature(call).parameters.items())
    params.update(extra_kwarg_specs)

    args = list(args)
    allkwargs = {}
    at_default = set()
    missing_args = []
    for pname, param in params.items():
        if param.kind is Parameter.VAR_KEYWORD:
            continue
        val = args.pop(0) if args else kwargs.get(pname, param.default)
        allkwargs[pname] = val
        if val is param.empty:
            missing_args.append(pname)
        elif val is param.default or val == param.default:
            at_default.add(pname)

    if missing_args:
        msg = (
            f'{call.__name__}() missing {len(missing_args)} required '
            f'argument{"s" if len(missing_args) > 1 else ""}: '
            f'{", ".join(repr(a) for a in missing_args)}'
        )
        raise TypeError(msg)

    return allkwargs, at_default
