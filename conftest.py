"""Fixture setup"""

__all__ = [
    'cfgman',
    'ghq_root',
    'gitremote',
    'recording_runner',
    'skip_without_git',
    'verify_pristine_gitconfig_global',
]


from ghq_core.tests.fixtures import (
    # function-scope config manager
    cfgman,
    # function-scope temporary root directory, declared via GHQ_ROOT
    ghq_root,
    # function-scope temporary Git repo to clone from
    gitremote,
    # function-scope runner that records instead of executing
    recording_runner,
    # function-scope auto-skip when Git is not installed
    skip_without_git,
    # verify no test leave contaminated config behind
    verify_pristine_gitconfig_global,
)
