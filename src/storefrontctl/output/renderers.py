"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from storefrontctl.output.console import create_console, get_output, style_for_breakpoint

if TYPE_CHECKING:
    from rich.console import Console

    from storefrontctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: one identifier per line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    d = result.data
    for key, id_key in (("templates", "id"), ("fields", "name"), ("issues", "path")):
        items = d.get(key)
        if isinstance(items, list):
            return "\n".join(str(item.get(id_key, "")) for item in items if isinstance(item, dict))

    if result.op in ("edit_path", "resolve"):
        value = d.get("edit_path", d.get("value"))
        return value if isinstance(value, str) else json.dumps(value)
    if result.op == "render" and d.get("output"):
        return str(d["output"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _compact(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return str(value)


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="sf.ok")
    op = Text(f"  {result.op}", style="sf.op")
    console.print(label, op, sep="")


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="sf.key")
    if key in ("id", "template", "field", "preset"):
        v = Text(_compact(value), style="sf.id")
    elif key in ("path", "output", "backup", "component") or key.endswith("_path"):
        v = Text(_compact(value), style="sf.path")
    elif key == "breakpoint":
        v = Text(_compact(value), style=style_for_breakpoint(str(value)))
    elif key == "value":
        v = Text(_compact(value), style="sf.value")
    else:
        v = Text(_compact(value))
    console.print(k, v, sep="")


def _bullets(console: Console, title: str, lines: list[str]) -> None:
    if not lines:
        return
    console.print(Text(f"  {title}:", style="sf.key"))
    for line in lines:
        console.print(f"    - {line}", markup=False)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="sf.error")
    op = Text(f"  {result.op}", style="sf.op")
    code = Text(f" [{err.code}]" if err else "", style="sf.key")
    console.print(label, op, code, Text(f"  {msg}"), sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}", markup=False)


# ── Migration renderers ───────────────────────────────────────────────


def _render_migrate_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "path", d.get("path"))
    _field(console, "version", f"{d.get('from_version')} -> {d.get('to_version')}")
    _field(console, "needs_migration", d.get("needs_migration"))
    _bullets(console, "pending", d.get("pending", []))


def _render_migrate_apply(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "path", d.get("path"))
    _field(console, "version", f"{d.get('from_version')} -> {d.get('to_version')}")
    _field(console, "migrated", d.get("migrated"))
    _field(console, "written", d.get("written"))
    if d.get("backup"):
        _field(console, "backup", d["backup"])
    _bullets(console, "applied", d.get("applied", []))
    if verbose and "page" in d:
        console.print(json.dumps(d["page"], indent=2, ensure_ascii=False), markup=False)


# ── Field renderers ───────────────────────────────────────────────────


def _render_adapt(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "template", d.get("template"))
    _field(console, "preset", d.get("preset") or "-")
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Field", style="sf.id", no_wrap=True)
    table.add_column("Value")
    for name, value in d.get("fields", {}).items():
        table.add_row(name, _compact(value))
    console.print(table)


def _render_edit_path(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    for key in ("field", "alias", "settings_key", "edit_path"):
        _field(console, key, d.get(key))
    if d.get("fallback_keys"):
        _field(console, "fallback_keys", ", ".join(d["fallback_keys"]))


def _render_list_fields(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    fields = result.data.get("fields", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Field", style="sf.id", no_wrap=True)
    table.add_column("Label", style="sf.title")
    table.add_column("Category")
    table.add_column("Kind")
    table.add_column("Edit path", style="sf.path")
    if verbose:
        table.add_column("Default")
    for f in fields:
        row = [f["name"], f["label"], f["category"], f["kind"], f["edit_path"]]
        if verbose:
            row.append(_compact(f.get("default")))
        table.add_row(*row)
    console.print(table)
    console.print(f"\n{result.data.get('count', len(fields))} fields")


def _render_resolve(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "doc_path", d.get("doc_path"))
    _field(console, "breakpoint", d.get("breakpoint"))
    _field(console, "value", d.get("value"))
    if verbose:
        _field(console, "responsive", d.get("responsive"))
        _field(console, "raw", d.get("raw"))


# ── Template renderers ────────────────────────────────────────────────


def _render_list_templates(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    templates = result.data.get("templates", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="sf.id", no_wrap=True)
    table.add_column("Name", style="sf.title")
    table.add_column("Category")
    table.add_column("Settings")
    if verbose:
        table.add_column("Description", style="dim")
    for t in templates:
        row = [t["id"], t["name"], t["category"], t["settings_component"]]
        if verbose:
            row.append(t.get("description", ""))
        table.add_row(*row)
    console.print(table)
    console.print(f"\n{result.data.get('count', len(templates))} templates")


def _render_show_template(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    lines = [
        d.get("description", ""),
        "",
        f"category: {d.get('category')}",
        f"component: {d.get('component')}",
    ]
    preset = d.get("preset") or {}
    if preset:
        lines.append(f"preset: {preset.get('id')} ({preset.get('name')})")
    panel = d.get("panel") or {}
    if panel:
        lines.append(f"settings: {panel.get('title')} [{', '.join(panel.get('categories', []))}]")
        if verbose:
            lines.append(f"fields: {', '.join(panel.get('fields', []))}")
    if verbose and preset.get("settings"):
        lines.append("")
        lines.extend(f"{k} = {v}" for k, v in preset["settings"].items())
    console.print(
        Panel(Text("\n".join(lines)), title=f"{d.get('id')} · {d.get('name')}", border_style="dim", expand=False)
    )


# ── Check / render ────────────────────────────────────────────────────


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "template", d.get("template"))
    _field(console, "version", d.get("from_version"))
    if d.get("needs_migration"):
        console.print(Text("  migration pending", style="sf.warning"))
        if verbose:
            _bullets(console, "pending", d.get("pending", []))

    issues = d.get("issues", [])
    if not issues:
        console.print(Text("  no content issues", style="sf.ok"))
        return
    for issue in issues:
        console.print(
            Text("  warning ", style="sf.warning"),
            Text(issue["path"], style="sf.path"),
            Text(f"  {issue['message']}"),
            sep="",
        )
    console.print(f"\n{d.get('count', len(issues))} issues")


def _render_render(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    for key in ("template", "preset", "breakpoint", "edit", "output", "bytes"):
        if d.get(key) is not None:
            _field(console, key, d[key])
    if verbose:
        _field(console, "component", d.get("component"))


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    # Migration
    "migrate_check": _render_migrate_check,
    "migrate_apply": _render_migrate_apply,
    # Fields
    "adapt": _render_adapt,
    "edit_path": _render_edit_path,
    "list_fields": _render_list_fields,
    "resolve": _render_resolve,
    # Templates
    "list_templates": _render_list_templates,
    "show_template": _render_show_template,
    # Check / render
    "check": _render_check,
    "render": _render_render,
}
