"""
tunegraph: in-memory graph and search layer for music recommendation.
"""

from .app import TuneGraph, build_app
from .catalog import Catalog, load_catalog
from .config import Settings, load_settings

__all__ = ["TuneGraph", "build_app", "Catalog", "load_catalog", "Settings", "load_settings"]

__version__ = "0.1"
