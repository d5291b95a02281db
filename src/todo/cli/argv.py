"""
Rewrites todo's command line before Typer parses it.

``todo --version`` runs the version command, ``todo help get`` shows the
help for ``get``, and ``--debug`` works after the command name too.
"""

_VERSION_FLAGS = ("--version", "-V")
_DEBUG_FLAG = "--debug"


def preprocess_argv(argv: list[str]) -> list[str]:
    """Return argv in the shape the Typer app expects."""
    if not argv:
        return argv

    if argv[0] in _VERSION_FLAGS:
        return ["version"]

    if argv[0] == "help":
        return _rewrite_help(argv[1:])

    return _hoist_debug(argv)


def _rewrite_help(rest: list[str]) -> list[str]:
    """``help [command]`` becomes ``[command] --help``."""
    for token in rest:
        if token.startswith("-") or token == "help":
            continue
        return [token, "--help"]
    return ["--help"]


def _hoist_debug(argv: list[str]) -> list[str]:
    """Move ``--debug`` in front of the command, once.

    Tokens after ``--`` are left alone so a task head can be ``--debug``.
    """
    if _DEBUG_FLAG not in argv:
        return argv

    rest: list[str] = []
    debug = False
    for i, token in enumerate(argv):
        if token == "--":
            rest.extend(argv[i:])
            break
        if token == _DEBUG_FLAG:
            debug = True
        else:
            rest.append(token)
    return [_DEBUG_FLAG, *rest] if debug else rest
