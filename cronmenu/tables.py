"""
Box-drawn console tables.

Colour is applied after cells are padded, so escape codes never
affect column widths.
"""

from typing import Any, List, Optional, Sequence

RESET = "\033[0m"

# style name -> (title colour, header colour)
STYLES = {
    'green': ("\033[1;30;42m", "\033[30;47m"),
    'red': ("\033[1;30;41m", "\033[30;47m"),
    'bright': ("\033[1;97;44m", "\033[1;96m"),
}


def _colorize(text: str, code: Optional[str]) -> str:
    if not code:
        return text
    return f"{code}{text}{RESET}"


def display_text(value: Any) -> str:
    """str() a cell, showing undecodable bytes as U+FFFD."""
    text = str(value)
    return text.encode('utf-8', 'surrogateescape').decode('utf-8', 'replace')


def make_row(cells: Sequence[str], widths: Sequence[int], code: Optional[str] = None) -> str:
    padded = [cell.ljust(w) for cell, w in zip(cells, widths)]
    if code:
        padded = [_colorize(cell, code) for cell in padded]
    return "│ " + " │ ".join(padded) + " │"


def make_separator(widths: Sequence[int], left: str, mid: str, right: str, fill: str = '─') -> str:
    return left + mid.join(fill * (w + 2) for w in widths) + right


def render_table(
    headers: Optional[Sequence[Any]],
    rows: Sequence[Sequence[Any]],
    title: Optional[str] = None,
    style: Optional[str] = None,
    color: bool = True
) -> str:
    """
    Render a table as a string.

    Args:
        headers: Column headers, or None for a headerless table
        rows: Table rows; cells are converted with str()
        title: Optional title bar spanning the whole table
        style: One of STYLES ('green', 'red', 'bright')
        color: Emit ANSI colour codes

    Returns:
        The rendered table (no trailing newline)
    """
    header_cells = [display_text(h) for h in headers] if headers else None
    body = [[display_text(cell) for cell in row] for row in rows]

    columns = len(header_cells) if header_cells else max((len(r) for r in body), default=1)
    widths = [0] * columns
    for row in ([header_cells] if header_cells else []) + body:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    # Widen the last column when the title is wider than the table
    if title:
        inner = sum(w + 2 for w in widths) + columns - 1
        if len(title) + 2 > inner:
            widths[-1] += len(title) + 2 - inner

    title_code, header_code = (None, None)
    if color and style:
        title_code, header_code = STYLES[style]

    lines = []
    if title:
        inner = sum(w + 2 for w in widths) + columns - 1
        lines.append(make_separator([inner - 2], '┌', '', '┐'))
        lines.append("│ " + _colorize(title.ljust(inner - 2), title_code) + " │")
        lines.append(make_separator(widths, '├', '┬', '┤'))
    else:
        lines.append(make_separator(widths, '┌', '┬', '┐'))

    if header_cells:
        lines.append(make_row(header_cells, widths, header_code))
        lines.append(make_separator(widths, '├', '┼', '┤'))

    for row in body:
        row = row + [''] * (columns - len(row))
        lines.append(make_row(row, widths))

    lines.append(make_separator(widths, '└', '┴', '┘'))
    return "\n".join(lines)


def print_table(
    headers: Optional[Sequence[Any]],
    rows: Sequence[Sequence[Any]],
    title: Optional[str] = None,
    style: Optional[str] = None,
    color: bool = True
):
    """Render and print a table."""
    print(render_table(headers, rows, title=title, style=style, color=color))


def numbered_rows(entries: List[str], placeholder: str) -> List[List[Any]]:
    """Number entries from 1, or return a single placeholder row."""
    if not entries:
        return [["-", placeholder]]
    return [[i, entry] for i, entry in enumerate(entries, start=1)]
