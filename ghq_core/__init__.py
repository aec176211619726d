"""Manage local working copies of remote repositories

Working copies are laid out under one or more root directories as
``<root>/<host>/<owner>/<name>``. Cloning and updating is delegated to
external version control tools (Git, Subversion, git-svn, Mercurial).
"""

__version__ = '0.1.0'
