import pytest

from ghq_core.remote import (
    RemoteReference,
    parse_reference,
)


def test_parse_shorthand():
    ref = parse_reference('motemen/ghq-test-repo')
    assert ref == RemoteReference(
        scheme='https',
        host='github.com',
        path=('motemen', 'ghq-test-repo'),
    )
    assert ref.url == 'https://github.com/motemen/ghq-test-repo'
    assert str(ref) == ref.url
    # surrounding whitespace and trailing slashes are irrelevant
    assert parse_reference(' motemen/ghq-test-repo/ ') == ref


def test_parse_shorthand_with_host():
    ref = parse_reference('gitlab.com/group/sub/project')
    assert ref.host == 'gitlab.com'
    assert ref.path == ('group', 'sub', 'project')
    assert ref.url == 'https://gitlab.com/group/sub/project'
    # a first segment without a dot is not a host
    assert parse_reference('owner/name/extra').host == 'github.com'


def test_parse_url():
    ref = parse_reference('https://GitHub.com/motemen/ghq-test-repo.git')
    assert ref.scheme == 'https'
    assert ref.host == 'github.com'
    assert ref.path == ('motemen', 'ghq-test-repo.git')
    assert ref.user is None
    assert ref.url == 'https://github.com/motemen/ghq-test-repo.git'

    ref = parse_reference('svn+ssh://me@svn.example.com:2222/project/trunk')
    assert ref.scheme == 'svn+ssh'
    assert ref.user == 'me'
    assert ref.host == 'svn.example.com:2222'
    assert ref.url == 'svn+ssh://me@svn.example.com:2222/project/trunk'


def test_parse_scp_like():
    ref = parse_reference('git@github.com:motemen/ghq-test-repo.git')
    assert ref == RemoteReference(
        scheme='ssh',
        host='github.com',
        path=('motemen', 'ghq-test-repo.git'),
        user='git',
    )
    assert ref.url == 'ssh://git@github.com/motemen/ghq-test-repo.git'
    # the user is optional
    ref = parse_reference('example.com:owner/name')
    assert ref.user is None
    assert ref.url == 'ssh://example.com/owner/name'


@pytest.mark.parametrize(
    'reference',
    [
        '',
        '   ',
        'name-only',
        'https://github.com/owner',
        'file:///tmp/some/repo',
        'git@github.com:name-only',
    ],
)
def test_parse_invalid(reference):
    with pytest.raises(ValueError):  # noqa: PT011
        parse_reference(reference)


def test_reference_invariants():
    with pytest.raises(ValueError, match='without a host'):
        RemoteReference(scheme='https', host='', path=('a', 'b'))
    with pytest.raises(ValueError, match='at least two path segments'):
        RemoteReference(scheme='https', host='github.com', path=('a',))
    with pytest.raises(ValueError, match='relative path component'):
        RemoteReference(scheme='https', host='..', path=('a', 'b'))
    ref = parse_reference('motemen/ghq-test-repo')
    # immutable
    with pytest.raises(AttributeError):
        ref.host = 'example.com'


@pytest.mark.parametrize(
    'reference',
    [
        'https://github.com/../../escaped/x',
        'https://github.com/owner/./name',
        'https://../owner/name',
        'git@github.com:owner/..',
        'example.com/../name/x',
        './name',
    ],
)
def test_parse_relative_components(reference):
    # no reference may address a location outside of a root directory
    with pytest.raises(ValueError, match='relative path component'):
        parse_reference(reference)


def test_as_ssh():
    ref = parse_reference('motemen/ghq-test-repo')
    ssh = ref.as_ssh()
    assert ssh.url == 'ssh://git@github.com/motemen/ghq-test-repo'
    # the source reference is unchanged
    assert ref.url == 'https://github.com/motemen/ghq-test-repo'
    # idempotent
    assert ssh.as_ssh() == ssh
    # a declared user is kept
    assert (
        parse_reference('https://someone@example.com/owner/name').as_ssh().url
        == 'ssh://someone@example.com/owner/name'
    )
    # SSH schemes are left alone
    for url in (
        'svn+ssh://svn.example.org/project/trunk',
        'git+ssh://example.com/owner/name',
        'ssh://example.com/owner/name',
    ):
        ref = parse_reference(url)
        assert ref.as_ssh() is ref


def test_local_segments():
    assert parse_reference('motemen/ghq-test-repo').local_segments == (
        'github.com',
        'motemen',
        'ghq-test-repo',
    )
    # a .git suffix does not make a difference
    assert (
        parse_reference('git@github.com:motemen/ghq-test-repo.git').local_segments
        == parse_reference('motemen/ghq-test-repo').local_segments
    )
    # but a name that is just the suffix is kept
    assert parse_reference('owner/.git').local_segments == (
        'github.com',
        'owner',
        '.git',
    )
