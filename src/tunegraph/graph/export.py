"""
NetworkX views of the in-memory graphs.

Used for statistics and for dumping a node-link JSON snapshot when
inspecting a running catalog. The snapshot is never read back.
"""

from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import networkx as nx
from loguru import logger

from tunegraph.graph.similarity import SimilarityGraph
from tunegraph.graph.social import SocialGraph


def similarity_to_networkx(graph: SimilarityGraph,
                           node_attrs: Optional[Callable[[Any], Dict[str, Any]]] = None) -> nx.Graph:
    """
    Copy a similarity graph into an undirected ``nx.Graph``.

    Args:
        graph: Source graph
        node_attrs: Optional callback returning attributes for each node

    Returns:
        Graph with a ``weight`` attribute on every edge
    """
    g = nx.Graph()
    for node in graph.all_nodes():
        g.add_node(node, **(node_attrs(node) if node_attrs else {}))
    for node in graph.all_nodes():
        for neighbor, weight in graph.neighbors(node).items():
            g.add_edge(node, neighbor, weight=weight)
    return g


def social_to_networkx(graph: SocialGraph) -> nx.Graph:
    g = nx.Graph()
    for user in graph.all_nodes():
        g.add_node(user)
        for friend in graph.neighbors(user):
            g.add_edge(user, friend)
    return g


def graph_stats(g: nx.Graph) -> Dict[str, Any]:
    """Get statistics about a graph."""
    if g.number_of_nodes() == 0:
        return {
            "nodes": 0,
            "edges": 0,
            "density": 0.0,
            "avg_degree": 0.0
        }

    degrees = [d for _, d in g.degree()]
    stats = {
        "nodes": g.number_of_nodes(),
        "edges": g.number_of_edges(),
        "density": nx.density(g),
        "avg_degree": sum(degrees) / len(degrees),
        "max_degree": max(degrees),
        "min_degree": min(degrees),
    }

    # Skip for very large graphs
    if g.number_of_nodes() < 10000:
        stats["connected_components"] = nx.number_connected_components(g)
    else:
        stats["connected_components"] = None
    return stats


def export_to_json(g: nx.Graph, output_path: str | Path) -> Path:
    """
    Write ``g`` as node-link JSON.

    Args:
        g: Graph to export
        output_path: Path to save the JSON file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    data = nx.node_link_data(g)
    with open(output_path, 'w') as f:
        json.dump(data, f, indent=2, default=str)

    logger.info(f"Graph exported to {output_path}")
    return output_path
