# topmark:header:start
#
#   project      : svgtidy
#   file         : passes.py
#   file_relpath : src/svgtidy/cli/commands/passes.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""svgtidy `passes` command.

Lists every registered pass in pipeline order, with its default state and the
first line of its description. With ``--enable``/``--disable`` (and any
configuration files) the listing shows what the effective pipeline would run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from svgtidy.cli.cmd_common import build_config_common
from svgtidy.cli.options import CONTEXT_SETTINGS, common_config_options, split_names
from svgtidy.pipeline.pipelines import PASS_ORDER, resolve_pass_names
from svgtidy.pipeline.registry import get_pass_registry

if TYPE_CHECKING:
    from svgtidy.cli_shared.console_api import ConsoleLike


@click.command(
    name="passes",
    help="List the optimization passes in pipeline order.",
    context_settings=CONTEXT_SETTINGS,
)
@click.option("--enable", "enable", multiple=True, metavar="PASSES", help="Passes to switch on.")
@click.option("--disable", "disable", multiple=True, metavar="PASSES", help="Passes to switch off.")
@common_config_options
def passes_command(
    *,
    enable: tuple[str, ...],
    disable: tuple[str, ...],
    no_config: bool,
    config_paths: tuple[str, ...],
) -> None:
    """List the passes, marking the ones the effective pipeline runs."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    config = build_config_common(
        no_config=no_config,
        config_paths=config_paths,
        overrides={"enable": split_names(enable), "disable": split_names(disable)},
    )
    selected = set(resolve_pass_names(config.enable, config.disable))
    registry = get_pass_registry()
    width = max(len(name) for name in PASS_ORDER)

    for index, name in enumerate(PASS_ORDER, start=1):
        info = registry[name]
        if name in selected:
            mark = console.styled("on ", fg="green")
        else:
            mark = console.styled("off", dim=True)
        default = "" if info.enabled_by_default else " (off by default)"
        console.print(f"{index:2d}. {mark} {name:<{width}}  {info.description}{default}")
