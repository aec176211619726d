from itertools import product
from pathlib import Path

import pytest

from ghq_core.remote import parse_reference
from ghq_core.runners import ToolExecutionError
from ghq_core.tests import (
    CallRecorder,
    call_git_addcommit,
    git_oneline,
)
from ghq_core.vcs import (
    ConfigurationError,
    FilesystemError,
    VCSBackend,
    ensure_parent_dir,
)

remote = 'https://example.com/owner/name'
local = '/ghq/example.com/owner/name'


def _expected_clone_args(backend, branch, shallow, recursive):
    # the documented command line of each tool, built independently
    if backend is VCSBackend.git:
        return [
            'git',
            'clone',
            *(['--branch', branch] if branch else []),
            *(['--depth', '1'] if shallow else []),
            *(['--recursive'] if recursive else []),
            remote,
            local,
        ]
    if backend is VCSBackend.subversion:
        return [
            'svn',
            'checkout',
            *(['--depth', '1'] if shallow else []),
            remote,
            local,
        ]
    if backend is VCSBackend.gitsvn:
        return ['git', 'svn', 'clone', remote, local]
    return ['hg', 'clone', remote, local]


@pytest.mark.parametrize(
    ('backend', 'branch', 'shallow', 'recursive'),
    list(product(VCSBackend, (None, 'develop'), (False, True), (False, True))),
)
def test_clone_args(backend, branch, shallow, recursive):
    args = backend.clone_args(
        remote,
        local,
        branch=branch,
        shallow=shallow,
        recursive=recursive,
    )
    assert args == _expected_clone_args(backend, branch, shallow, recursive)
    # flags of unsupported options never show up
    if not backend.supports('branch'):
        assert '--branch' not in args
    if not backend.supports('shallow'):
        assert '--depth' not in args
    if not backend.supports('recursive'):
        assert '--recursive' not in args


def test_clone_args_all_flags_order():
    assert VCSBackend.git.clone_args(
        remote,
        local,
        branch='develop',
        shallow=True,
        recursive=True,
    ) == [
        'git',
        'clone',
        '--branch',
        'develop',
        '--depth',
        '1',
        '--recursive',
        remote,
        local,
    ]


def test_clone_args_empty_branch():
    assert VCSBackend.git.clone_args(remote, local, branch='') == [
        'git',
        'clone',
        remote,
        local,
    ]


def test_clone_args_reference_and_path():
    ref = parse_reference('owner/name')
    assert VCSBackend.mercurial.clone_args(ref, Path('/some/where')) == [
        'hg',
        'clone',
        'https://github.com/owner/name',
        str(Path('/some/where')),
    ]


@pytest.mark.parametrize(
    ('backend', 'args'),
    [
        (VCSBackend.git, ['git', 'pull', '--ff-only']),
        (VCSBackend.subversion, ['svn', 'update']),
        (VCSBackend.gitsvn, ['git', 'svn', 'rebase']),
        (VCSBackend.mercurial, ['hg', 'pull', '--update']),
    ],
)
def test_update(backend, args, tmp_path):
    assert backend.update_args() == args
    runner = CallRecorder()
    backend.update(tmp_path, runner=runner)
    backend.update(str(tmp_path), runner=runner)
    assert len(runner.calls) == 2  # noqa: PLR2004
    for call in runner.calls:
        assert call.cmd == args
        assert call.cwd == tmp_path


@pytest.mark.parametrize('backend', list(VCSBackend))
def test_clone_creates_parents(backend, tmp_path):
    target = tmp_path / 'example.com' / 'owner' / 'name'
    runner = CallRecorder()
    backend.clone(remote, target, shallow=True, runner=runner)
    # parents exist, the target itself is left to the tool
    assert target.parent.is_dir()
    assert not target.exists()
    assert runner.last.cmd == backend.clone_args(remote, target, shallow=True)
    # runs in the current directory
    assert runner.last.cwd is None


def test_clone_unwritable_root(tmp_path):
    # a file in place of the root directory makes directory creation fail
    # regardless of the privileges of the test process
    root = tmp_path / 'root'
    root.write_text('not a directory')
    runner = CallRecorder()
    with pytest.raises(FilesystemError) as e:
        VCSBackend.git.clone(
            remote,
            root / 'example.com' / 'owner' / 'name',
            runner=runner,
        )
    assert e.value.filename == str(root / 'example.com' / 'owner')
    assert isinstance(e.value.__cause__, OSError)
    # the tool was never invoked
    assert runner.calls == []


def test_ensure_parent_dir(tmp_path):
    target = tmp_path / 'a' / 'b' / 'c'
    ensure_parent_dir(target)
    assert target.parent.is_dir()
    # idempotent
    ensure_parent_dir(target)
    (tmp_path / 'file').touch()
    with pytest.raises(FilesystemError):
        ensure_parent_dir(tmp_path / 'file' / 'sub' / 'c')


def test_clone_failure_propagates(tmp_path):
    err = ToolExecutionError(cmd=['git', 'clone'], returncode=128)
    runner = CallRecorder(fail_with=err)
    with pytest.raises(ToolExecutionError) as e:
        VCSBackend.git.clone(remote, tmp_path / 'name', runner=runner)
    assert e.value is err
    # exactly one attempt, no retry
    assert len(runner.calls) == 1


def test_is_working_copy(tmp_path):
    for backend in VCSBackend:
        assert not backend.is_working_copy(tmp_path)
    (tmp_path / '.hg').mkdir()
    assert VCSBackend.mercurial.is_working_copy(tmp_path)
    assert not VCSBackend.git.is_working_copy(tmp_path)
    (tmp_path / '.git').mkdir()
    assert VCSBackend.git.is_working_copy(tmp_path)
    assert VCSBackend.gitsvn.is_working_copy(str(tmp_path))
    assert not VCSBackend.subversion.is_working_copy(tmp_path)
    # a non-existing path is no working copy
    assert not VCSBackend.git.is_working_copy(tmp_path / 'absent')


def test_from_name():
    assert VCSBackend.from_name('git') is VCSBackend.git
    assert VCSBackend.from_name('GitHub') is VCSBackend.git
    assert VCSBackend.from_name('svn') is VCSBackend.subversion
    assert VCSBackend.from_name('git-svn') is VCSBackend.gitsvn
    assert VCSBackend.from_name('hg') is VCSBackend.mercurial
    for b in VCSBackend:
        assert VCSBackend.from_name(b.value) is b
    with pytest.raises(ConfigurationError, match='unsupported repository kind'):
        VCSBackend.from_name('cvs')


def test_backend_properties():
    assert [(str(b), b.executable, b.marker) for b in VCSBackend] == [
        ('git', 'git', '.git'),
        ('subversion', 'svn', '.svn'),
        ('gitsvn', 'git', '.git'),
        ('mercurial', 'hg', '.hg'),
    ]


def test_git_clone_update_roundtrip(gitremote, tmp_path):
    target = tmp_path / 'clones' / 'gitremote'
    VCSBackend.git.clone(str(gitremote), target)
    assert VCSBackend.git.is_working_copy(target)
    assert (target / 'README').read_text() == 'clone me'

    # new commit in the remote, the update brings it in
    (gitremote / 'NEWS').write_text('news')
    call_git_addcommit(gitremote, msg='add news')
    VCSBackend.git.update(target)
    assert (target / 'NEWS').read_text() == 'news'
    assert git_oneline(['rev-parse', 'HEAD'], cwd=target) == git_oneline(
        ['rev-parse', 'HEAD'], cwd=gitremote
    )


def test_git_clone_existing_target_fails(gitremote, tmp_path):
    target = tmp_path / 'occupied'
    target.mkdir()
    (target / 'somefile').touch()
    with pytest.raises(ToolExecutionError) as e:
        VCSBackend.git.clone(str(gitremote), target)
    assert e.value.returncode != 0
