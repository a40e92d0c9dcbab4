"""
Visualization for the Longhorn Network.
"""

from __future__ import annotations

import math
from typing import Dict, List, Optional, Tuple, TYPE_CHECKING

import networkx as nx
import matplotlib.pyplot as plt

if TYPE_CHECKING:
    from ..graph.social_graph import SocialGraph
    from ..models.student import Student


def draw_social_graph(
    graph: "SocialGraph",
    highlight_path: Optional[List["Student"]] = None,
    show: bool = True,
    save_path: Optional[str] = None,
):
    """
    Draw the social graph:
    - edge width grows with connection strength, labels show the weight
    - roommate pairs (mutual) are drawn red
    - an optional referral path is drawn orange on top

    Returns the matplotlib Figure, or None if the graph is empty.
    """
    G = graph.to_networkx()
    if G.number_of_nodes() == 0:
        print("\n(No students to display.)")
        return None

    nodes = graph.all_nodes()
    by_name = {s.name: s for s in nodes}

    roommate_edges = set()
    for s in nodes:
        r = by_name.get(s.roommate) if s.roommate else None
        if r is not None and r.roommate == s.name:
            roommate_edges.add(tuple(sorted((s.name, r.name))))

    path_edges = set()
    if highlight_path:
        for a, b in zip(highlight_path, highlight_path[1:]):
            path_edges.add(tuple(sorted((a.name, b.name))))

    edges: List[Tuple[str, str]] = []
    edge_colors: List[str] = []
    edge_widths: List[float] = []
    edge_labels: Dict[Tuple[str, str], str] = {}

    for u, v, data in G.edges(data=True):
        w = float(data.get("weight", 0))
        key = tuple(sorted((u, v)))
        if key in path_edges:
            color = "orange"
        elif key in roommate_edges:
            color = "red"
        else:
            color = "lightgray" if w <= 0 else "gray"
        edges.append((u, v))
        edge_colors.append(color)
        edge_widths.append(max(0.5, min(6.0, 0.5 + math.log1p(w))))
        if w > 0:
            edge_labels[(u, v)] = f"{int(w)}"

    pos = nx.spring_layout(G, seed=42, weight="weight")

    fig = plt.figure(figsize=(9, 6))
    nx.draw_networkx_nodes(G, pos, node_color="lightblue", node_size=900)
    nx.draw_networkx_labels(G, pos, font_size=8)
    nx.draw_networkx_edges(G, pos, edgelist=edges, edge_color=edge_colors, width=edge_widths)
    nx.draw_networkx_edge_labels(G, pos, edge_labels=edge_labels, font_size=7)
    plt.title("Social graph: roommates (red), referral path (orange)")
    plt.axis("off")
    plt.tight_layout()

    if save_path:
        fig.savefig(save_path)
    if show:
        plt.show()
    return fig
