"""Выводит результат жеребьевки текстом и HTML-разметкой."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from football_draw.models.draw import DrawResult

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"

templates = Environment(
    loader=FileSystemLoader(TEMPLATES_DIR),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_text(result: DrawResult) -> str:
    lines: list[str] = []
    for label, group in zip(result.group_labels, result.groups):
        lines.append(f"Group {label}:")
        lines.extend(group)
        # Пустая строка между корзинами.
        lines.append("")
    lines.append("Matches:")
    lines.extend(str(match) for match in result.matches)
    return "\n".join(lines) + "\n"


def render_markup(result: DrawResult) -> str:
    template = templates.get_template("draw.html")
    return template.render(groups=list(zip(result.group_labels, result.groups)), matches=result.matches)
