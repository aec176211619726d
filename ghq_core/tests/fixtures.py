"""Collection of fixtures for facilitation test implementations"""

from __future__ import annotations

from shutil import which
from tempfile import NamedTemporaryFile
from typing import (
    TYPE_CHECKING,
)

if TYPE_CHECKING:
    from pathlib import Path

import pytest

from ghq_core.config import get_manager
from ghq_core.runners import call_git
from ghq_core.tests.utils import (
    CallRecorder,
    call_git_addcommit,
)

magic_marker = 'c4d0de12-8008-11ef-86ea-3776083add61'
standard_gitconfig = f"""\
[ghqtest "magic"]
    test-marker = {magic_marker}
[user]
    name = GHQ Tester
    email = test@example.com
"""


@pytest.fixture(autouse=False, scope='function')  # noqa: PT003
def cfgman(monkeypatch):
    """Yield a configuration manager with a test-specific global scope

    Any test using this fixture will be skipped for Git versions earlier
    than 2.32, because the `GIT_CONFIG_GLOBAL` environment variable used
    here was only introduced with that version.
    """
    manager = get_manager()
    ggc = manager.sources['git-global']
    with NamedTemporaryFile(
        'w',
        prefix='ghq_gitcfg_global_',
        delete=False,
    ) as tf:
        tf.write(standard_gitconfig)
        # windows does not like the file being open already when
        # git-config would open it for reading
        tf.close()
        with monkeypatch.context() as m:
            m.setenv('GIT_CONFIG_GLOBAL', tf.name)
            ggc.reinit()
            ggc.load()
            if (
                ggc['ghqtest.magic.test-marker'].pristine_value != magic_marker
            ):  # pragma: no cover
                pytest.skip(
                    'Cannot establish isolated global Git config scope '
                    '(possibly Git too old (needs v2.32)'
                )
            yield manager
    # reload to put the previous config in effect again
    ggc.reinit()
    ggc.load()


@pytest.fixture(autouse=True, scope='function')  # noqa: PT003
def verify_pristine_gitconfig_global():
    """No test must modify a user's global Git config.

    If such modifications are needed, a custom configuration setup
    limited to the scope of the test requiring it must be arranged.
    """
    if which('git') is None:  # pragma: no cover
        # nothing to protect
        yield
        return

    from ghq_core.config import GlobalGitConfig

    def get_ggc_state():
        ggc = GlobalGitConfig()
        return {k: ggc[k].pristine_value for k in ggc.keys()}

    pre = get_ggc_state()
    yield
    if pre != get_ggc_state():  # pragma: no cover
        msg = (
            'Global Git config modification detected. '
            'Test must be modified to use a temporary configuration target. '
            'Hint: use the `cfgman` fixture.'
        )
        raise AssertionError(msg)


@pytest.fixture(autouse=False, scope='function')  # noqa: PT003
def skip_without_git():
    if which('git') is None:  # pragma: no cover
        msg = 'skipped, Git is not installed'
        raise pytest.skip(msg)


@pytest.fixture(autouse=False, scope='function')  # noqa: PT003
def ghq_root(tmp_path_factory, monkeypatch) -> Path:
    """Yield the path to an empty root directory for working copies

    The root is also declared via ``GHQ_ROOT``, such that it is the only
    root reported by :func:`~ghq_core.remote.get_local_roots`.
    """
    # must use the factory to get a unique path even when a concrete
    # test also uses `tmp_path`
    path = tmp_path_factory.mktemp('ghqroot')
    monkeypatch.setenv('GHQ_ROOT', str(path))
    return path


@pytest.fixture(autouse=False, scope='function')  # noqa: PT003
def recording_runner() -> CallRecorder:
    """Yield a runner that records commands instead of executing them"""
    return CallRecorder()


@pytest.fixture(autouse=False, scope='function')  # noqa: PT003
def gitremote(tmp_path_factory, skip_without_git) -> Path:  # noqa: ARG001
    """Yield the path to a Git repository with a single commit

    It can be used as a clone source, via its path or a ``file://`` URL.
    """
    path = tmp_path_factory.mktemp('gitremote')
    call_git(
        ['init'],
        cwd=path,
        capture_output=True,
    )
    (path / 'README').write_text('clone me')
    call_git_addcommit(path)
    return path
