# topmark:header:start
#
#   project      : svgtidy
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Shared pytest setup for the svgtidy suite.

Provides typed mark wrappers, the `isolation` fixture (a throwaway project
directory that stops configuration discovery), configuration factories and
`run_pass`, which runs one registered pass over a markup string.

Passes are registered once per session in `pytest_configure`, and internal
logging runs at TRACE so pass bookkeeping is exercised by every test.

Configuration objects follow the frozen/mutable split of `svgtidy.config.model`:
build a `MutableConfig`, then `freeze()` it. Never mutate a frozen `Config`;
`thaw()` it instead.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from svgtidy.config import logging
from svgtidy.config.model import MutableConfig
from svgtidy.dom.parser import parse
from svgtidy.dom.printer import print_document
from svgtidy.pipeline.registry import get_pass_registry, register_all_passes

if TYPE_CHECKING:
    from pathlib import Path

    from svgtidy.config.model import Config

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.pipeline`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_svgtidy_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure svgtidy's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    SVGTIDY_LOG_LEVEL in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure pytest settings and customize logging for the test suite.

    Sets the logging level to TRACE and registers every pass module once, so
    that tests using the registry see the complete pass set.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
    register_all_passes()


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an isolated temporary directory.

    Configuration discovery walks up from the working directory; running from a
    fresh directory with a ``root = true`` marker keeps the developer's own
    ``svgtidy.toml`` files out of the picture.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    (cwd / "svgtidy.toml").write_text("root = true\n", encoding="utf-8")
    monkeypatch.chdir(cwd)
    return cwd


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides.

    Args:
        **overrides (Any): Field values to set on the mutable draft.

    Returns:
        Config: The frozen configuration.
    """
    draft: MutableConfig = make_mutable_config(**overrides)
    return draft.freeze()


def make_mutable_config(**overrides: Any) -> MutableConfig:
    """Return a `MutableConfig` from defaults with ``overrides`` applied as attributes."""
    draft: MutableConfig = MutableConfig.from_defaults()
    for key, value in overrides.items():
        setattr(draft, key, value)
    return draft


def run_pass(name: str, text: str, **options: Any) -> str:
    """Run a single registered pass over ``text`` and print the result compactly.

    Args:
        name (str): Registered pass name.
        text (str): Source markup.
        **options (Any): Configuration fields handed to the pass factory.

    Returns:
        str: The canonical output.
    """
    info = get_pass_registry()[name]
    pass_ = info.pass_class.from_config(make_config(**options))
    return print_document(pass_(parse(text)))
