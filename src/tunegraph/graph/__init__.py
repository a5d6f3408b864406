"""
Graph module for tunegraph.

Similarity graph (Dijkstra), social graph (BFS) and prefix trie.
"""

from .similarity import SimilarityGraph, similarity_cost
from .social import SocialGraph
from .trie import PrefixTrie

__all__ = ["SimilarityGraph", "SocialGraph", "PrefixTrie", "similarity_cost"]
