from __future__ import annotations

from typing import Any

from ghq_core.constraints.constraint import Constraint
from ghq_core.remote import (
    RemoteReference,
    parse_reference,
)


class EnsureRemoteReference(Constraint):
    """Ensure a valid remote repository reference

    A ``str`` is parsed with :func:`~ghq_core.remote.parse_reference`, a
    :class:`~ghq_core.remote.RemoteReference` is passed on as-is.
    """

    @property
    def input_synopsis(self):
        return 'remote repository reference'

    @property
    def input_description(self):
        return (
            'Repository URL, scp-like SSH address (user@host:owner/name), '
            'or a shorthand, either <host>/<owner>/<name>, or <owner>/<name> '
            'for a repository on GitHub'
        )

    def __call__(self, value: Any) -> RemoteReference:
        if isinstance(value, RemoteReference):
            return value
        if not isinstance(value, str):
            self.raise_for(value, 'must be a str, not {type}', type=type(value))
        try:
            return parse_reference(value)
        except ValueError as e:
            self.raise_for(
                value,
                'not a valid {kind}\n{__itemized_causes__}',
                kind=self.input_synopsis,
                __caused_by__=e,
            )
