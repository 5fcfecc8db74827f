from __future__ import annotations

from typing import Sequence

import networkx as nx
import matplotlib.pyplot as plt

from markedcycles.cells.incidence import NestedCell


def forest_layout(nested: Sequence[NestedCell]) -> dict:
    """
    Positions for a nested listing: one column per cell in listing order,
    one row per depth (roots on top).
    """
    return {cell: (float(i), -float(depth)) for i, (cell, depth) in enumerate(nested)}


def draw_incidence_forest(
    nested: Sequence[NestedCell],
    *,
    binary: bool = False,
    node_size: int = 420,
    font_size: int = 8,
    save_path: str | None = None,
    ax=None,
):
    """
    Draw the incidence forest of a nested listing, parents above children.

    Edges join each cell to the nearest shallower cell before it in the
    listing, which is its parent in the pre-order walk.
    If save_path is set, saves a PNG there and closes the figure.
    Returns the matplotlib axes.
    """
    G = nx.DiGraph()
    stack: list = []
    for cell, depth in nested:
        G.add_node(cell)
        del stack[depth:]
        if stack:
            G.add_edge(stack[-1], cell)
        stack.append(cell)

    pos = forest_layout(nested)
    labels = {cell: cell.format(binary) for cell, _ in nested}

    if ax is None:
        width = max(4.0, 0.6 * len(nested))
        depth_max = max((d for _, d in nested), default=0)
        fig, ax = plt.subplots(figsize=(width, 1.5 + 1.2 * depth_max))
    else:
        fig = ax.figure

    ax.set_axis_off()
    if len(nested) == 0:
        ax.text(0.5, 0.5, "No cells", ha="center", va="center", transform=ax.transAxes)
    else:
        nx.draw_networkx(
            G,
            pos=pos,
            ax=ax,
            labels=labels,
            node_size=node_size,
            font_size=font_size,
            node_color="white",
            edgecolors="black",
            arrows=False,
        )

    if save_path:
        fig.tight_layout()
        fig.savefig(save_path, dpi=200)
        plt.close(fig)

    return ax
