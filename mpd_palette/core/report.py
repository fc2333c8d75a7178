"""Report builder — text and JSON output for mpd-palette results."""

import json
from typing import Any

from mpd_palette.core.types import Report


def _format_select(data: dict[str, Any]) -> list[str]:
    lines = [
        f'  {data["ncolours"]} of {len(data["candidates"])} candidates, '
        f'{data["nreps"]} draws, {data["distinct"]} distinct scores'
    ]
    for i, pal in enumerate(data['palettes'], start=1):
        lines.append(f'  #{i}  MPD={pal["mpd"]:.2f}  (draw {pal["draw"]})  {" ".join(pal["colours"])}')
    if data.get('swatch'):
        lines.append(f'  swatch: {data["swatch"]}')
    return lines


def _format_filter(data: dict[str, Any]) -> list[str]:
    lines = [f'  kept {len(data["kept"])}, dropped {len(data["dropped"])}']
    for c in data['kept']:
        lines.append(f'  {c["hex"]:<9} S={c["saturation"]:.2f}  L={c["lightness"]:.2f}')
    if data['dropped']:
        lines.append(f'  dropped: {" ".join(data["dropped"])}')
    return lines


def _format_distances(data: dict[str, Any]) -> list[str]:
    names = data['names']
    width = max([9] + [len(n) + 1 for n in names])
    lines = []
    for name in names:
        L, a, b = data['lab'][name]
        lines.append(f'  {name:<{width}} L*={L:6.2f}  a*={a:7.2f}  b*={b:7.2f}')
    lines.append('')
    lines.append('  ' + ' ' * width + ''.join(f'{n:>{width}}' for n in names))
    for name, row in zip(names, data['matrix']):
        lines.append(f'  {name:<{width}}' + ''.join(f'{v:>{width}.1f}' for v in row))
    mp = data.get('max_pair')
    if mp:
        lines.append('')
        lines.append(f'  most distant: {mp["a"]} ↔ {mp["b"]}  Δ={mp["distance"]:.2f}')
    return lines


def _format_score(data: dict[str, Any]) -> list[str]:
    return [
        f'  colours: {" ".join(data["colours"])}',
        f'  MPD={data["mpd"]:.2f}  min={data["min_distance"]:.2f}  max={data["max_distance"]:.2f}',
    ]


_FORMATTERS = {
    'select': _format_select,
    'filter': _format_filter,
    'distances': _format_distances,
    'score': _format_score,
}


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    header = f'mpd-palette: {len(report.colours)} colours'
    if report.source:
        header += f' from {report.source}'
    lines.append(header)
    lines.append('')

    for command_name, data in report.sections.items():
        lines.append(f'── {command_name}')
        formatter = _FORMATTERS.get(command_name)
        if formatter is not None:
            lines.extend(formatter(data))
        else:
            # Generic fallback
            for k, v in data.items():
                lines.append(f'  {command_name}.{k}: {v}')
        lines.append('')

    return '\n'.join(lines).rstrip('\n')


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {'colours': report.colours}
    if report.source:
        obj['source'] = report.source
    obj['results'] = report.sections
    obj['warnings'] = report.warnings
    return json.dumps(obj, indent=2)
