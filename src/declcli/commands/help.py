"""Help text and completion candidates derived from the registry."""

from __future__ import annotations

from .registry import CommandRegistry

LIST_HEADER = "List of possible commands:"
LIST_FOOTER = "Choose wisely. Use help <command> if unsure!"
DIVIDER = "----"


def _render_list(registry: CommandRegistry) -> str:
    lines = [LIST_HEADER]
    for d in registry:
        lines.append(f"{d.name:>15} {d.arity} - {d.help}")
    lines.append(LIST_FOOTER)
    return "\n".join(lines)


def _render_detail(registry: CommandRegistry, name: str) -> str:
    blocks = []
    for d in registry.named(name):
        lines = [f"Command {d.name} ({d.arity} parameters): {d.help}"]
        for p in d.parameters:
            lines.append(f"@param {p.semantic_type.label}: {p.help}")
        blocks.append("\n".join(lines))
    if not blocks:
        return f"Command {name} not found"
    return f"\n{DIVIDER}\n".join(blocks)


def render_help(registry: CommandRegistry, name: str | None = None) -> str:
    """List every command, or detail all overloads of *name*."""
    if name is None:
        return _render_list(registry)
    return _render_detail(registry, name)


def list_completions(registry: CommandRegistry) -> frozenset[str]:
    return frozenset(registry.names())
