__all__ = [
    'CallRecorder',
    'call_git_addcommit',
    'git_oneline',
    'rmtree',
]

from .utils import (
    CallRecorder,
    call_git_addcommit,
    git_oneline,
    rmtree,
)
