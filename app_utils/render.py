"""
Declarative widget tree.

A widget is a `VStack` holding the title, an optional subtitle and one
`HStack` per grid row. The same tree feeds the Streamlit HTML view and the
PNG snapshot in `app_utils/plots.py`.
"""

import html
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

from app_utils.themes import cell_color, get_theme


class RenderMode(Enum):
    PRESENT = "present"
    HOME_SCREEN = "home_screen"


@dataclass
class Label:
    text: str
    size: int
    color: str
    bold: bool = False


@dataclass
class Spacer:
    size: int


@dataclass
class CellBox:
    size: int
    color: str
    corner_radius: int
    filled: bool = False


@dataclass
class HStack:
    children: List[Union[CellBox, Spacer]] = field(default_factory=list)


@dataclass
class VStack:
    children: List[Union[Label, Spacer, HStack]] = field(default_factory=list)
    width: int = 0
    padding: int = 0
    background: str = "#FFFFFF"


def build_widget(theme: str, title: str, subtitle: Optional[str], cells, spec,
                 widget, kind: str) -> VStack:
    palette = get_theme(theme)
    root = VStack(width=widget.widget_width, padding=widget.padding, background=palette["background"])

    root.children.append(Label(title, widget.title_size, palette["title"], bold=True))
    root.children.append(Spacer(widget.spacing))
    if subtitle:
        root.children.append(Label(subtitle, widget.subtitle_size, palette["subtitle"]))
        root.children.append(Spacer(widget.spacing))

    for r, row_cells in enumerate(cells):
        row = HStack()
        for c, cell in enumerate(row_cells):
            row.children.append(CellBox(spec.cell_size_px, cell_color(kind, cell.filled),
                                        widget.corner_radius, filled=cell.filled))
            if c < len(row_cells) - 1:
                row.children.append(Spacer(widget.spacing))
        root.children.append(row)
        if r < len(cells) - 1:
            root.children.append(Spacer(widget.spacing))
    return root


def to_html(node) -> str:
    if isinstance(node, VStack):
        inner = "".join(to_html(c) for c in node.children)
        return (
            f'<div class="widget" style="width:{node.width}px; padding:{node.padding}px; '
            f'background:{node.background}; border-radius:18px; box-sizing:border-box;">{inner}</div>'
        )
    if isinstance(node, HStack):
        inner = "".join(to_html(c) for c in node.children)
        return f'<div style="display:flex; flex-direction:row;">{inner}</div>'
    if isinstance(node, Label):
        weight = "700" if node.bold else "400"
        return (
            f'<div style="font-size:{node.size}px; font-weight:{weight}; color:{node.color};">'
            f'{html.escape(node.text)}</div>'
        )
    if isinstance(node, Spacer):
        return f'<div style="flex:none; width:{node.size}px; height:{node.size}px;"></div>'
    if isinstance(node, CellBox):
        return (
            f'<div style="flex:none; width:{node.size}px; height:{node.size}px; '
            f'background:{node.color}; border-radius:{node.corner_radius}px;"></div>'
        )
    raise TypeError(f"Unknown render node: {type(node).__name__}")
