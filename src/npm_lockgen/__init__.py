"""npm-lockgen core package.

This package rebuilds npm ``package-lock.json`` files from an already installed
``node_modules`` tree. It is callable from the bundled CLI as well as from
other tooling that wants the lockfile document without writing it.
"""

__all__ = [
    "builder",
    "core",
]
