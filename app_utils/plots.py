from pathlib import Path

import seaborn as sns
from matplotlib.figure import Figure
from matplotlib.patches import FancyBboxPatch

from app_utils.render import CellBox, HStack, Label, Spacer, VStack

sns.set_theme(style="white")

DPI = 100
LINE_HEIGHT = 1.25


def _node_height(node) -> float:
    if isinstance(node, Label):
        return node.size * LINE_HEIGHT
    if isinstance(node, Spacer):
        return node.size
    if isinstance(node, HStack):
        return max((c.size for c in node.children if isinstance(c, CellBox)), default=0)
    return 0


def widget_size(tree: VStack):
    height = 2 * tree.padding + sum(_node_height(n) for n in tree.children)
    return tree.width, height


def clean_axes(ax, width, height):
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_axis_off()


def widget_figure(tree: VStack) -> Figure:
    """Draw a widget tree at 1px per unit."""
    width, height = widget_size(tree)
    fig = Figure(figsize=(width / DPI, height / DPI), dpi=DPI)
    fig.patch.set_facecolor(tree.background)
    ax = fig.add_axes([0, 0, 1, 1])
    clean_axes(ax, width, height)

    y = tree.padding
    for node in tree.children:
        if isinstance(node, Label):
            ax.text(tree.padding, y, node.text, color=node.color, va="top", ha="left",
                    fontsize=node.size * 72 / DPI, fontweight="bold" if node.bold else "normal")
        elif isinstance(node, HStack):
            x = tree.padding
            for child in node.children:
                if isinstance(child, CellBox):
                    ax.add_patch(FancyBboxPatch(
                        (x, y), child.size, child.size,
                        boxstyle=f"round,pad=0,rounding_size={child.corner_radius}",
                        facecolor=child.color, edgecolor="none",
                    ))
                x += child.size
        y += _node_height(node)
    return fig


def save_widget_png(tree: VStack, path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig = widget_figure(tree)
    fig.savefig(path, dpi=DPI, facecolor=fig.get_facecolor())
    return path
