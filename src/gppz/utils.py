"""Provide general utility functions that would not fit in other modules."""

from collections.abc import Iterable, Iterator
from contextlib import suppress
from pathlib import Path
from typing import Any


def import_module_and_submodules(package_name: str) -> None:
    """Import all modules and submodules from a package.

    From https://github.com/allenai/allennlp/blob/master/allennlp/common/util.py.

    Args:
        package_name: Name of the package to fully import.
    """
    from importlib import import_module, reload
    from importlib import invalidate_caches as importlib_invalidate_caches
    from pkgutil import walk_packages
    from sys import modules

    importlib_invalidate_caches()

    if package_name in modules:
        module = modules[package_name]
        reload(module)
    else:
        module = import_module(package_name)
    path = getattr(module, "__path__", [])
    path_string = "" if not path else path[0]

    for module_finder, name, _ in walk_packages(path):
        if (
            path_string
            and hasattr(module_finder, "path")
            and module_finder.path != path_string
        ):
            continue
        subpackage = f"{package_name}.{name}"
        import_module_and_submodules(subpackage)


def config_dirs_hierarchy(user_config_dir: Path, current_dir: Path) -> Iterator[Path]:
    """Yield the directories that can hold a configuration file, least specific first.

    The user configuration directory comes first. Then, if `current_dir` lives in a \
    git working directory, every directory from the root of the working directory \
    down to `current_dir` is yielded. Otherwise only `current_dir` follows.

    Args:
        user_config_dir: Directory holding the user-wide configuration.
        current_dir: Most specific directory to consider.

    Yields:
        Directories to look into, in increasing order of precedence.
    """
    from .exceptions import GitRepositoryNotFoundError

    yield user_config_dir
    try:
        git_dir = get_git_dir(current_dir)
    except GitRepositoryNotFoundError:
        yield current_dir
        return
    if current_dir.resolve().is_relative_to(git_dir):
        yield from intermediate_dirs(git_dir, current_dir)
    else:
        yield current_dir


def intermediate_dirs(start: Path, end: Path) -> Iterator[Path]:
    start = start.resolve()
    yield start
    for part in end.resolve().relative_to(start).parts:
        start /= part
        yield start


def get_git_dir(path: Path) -> Path:
    """Search and resolve the path of the git dir containing the path given as argument.

    Args:
        path: Path contained in the git dir to search for.

    Raises:
        GitRepositoryNotFoundError: Raised if no git repository is found in the path \
            ancestors.

    Returns:
        Resolved path to the git repository containing the path given as argument.
    """
    from pygit2 import Repository, discover_repository

    from .exceptions import GitRepositoryNotFoundError

    repository = discover_repository(str(path))
    if repository is None:
        msg = "could not find the path of the current git working directory"
        raise GitRepositoryNotFoundError(msg)
    workdir = Repository(repository).workdir
    if workdir is None:
        msg = f"the git repository at {repository} has no working directory"
        raise GitRepositoryNotFoundError(msg)
    return Path(workdir).resolve()


def load_yaml(path: Path) -> Any:
    from yaml import safe_load

    return safe_load(path.read_text(encoding="utf8"))


def load_all_yamls(paths: Iterable[Path]) -> Iterator[Any]:
    for path in paths:
        with suppress(FileNotFoundError):
            yield load_yaml(path)


def split_flags(flags: str) -> list[str]:
    """Split a command line options string on whitespace, dropping empty tokens."""
    return flags.split()
