#!/usr/bin/env python
"""
Build the similarity and social graphs from a catalog file and print
recommendations.

Usage:
    # Basic usage - graph statistics for the configured catalog
    python scripts/build_graphs.py

    # Radio queue for a seed song and discovery for a user
    SONG_ID=1 USER_ID=1 python scripts/build_graphs.py

    # Autocomplete titles and dump the similarity graph as node-link JSON
    PREFIX="per" EXPORT_PATH=data/graphs/similarity.json python scripts/build_graphs.py
"""

from __future__ import annotations
import json
import os
import sys
from dataclasses import asdict

from loguru import logger

from tunegraph import build_app, load_catalog, load_settings
from tunegraph.config import configure_logging
from tunegraph.exceptions import TuneGraphError
from tunegraph.graph.export import export_to_json, similarity_to_networkx


def main():
    """Main entry point for building graphs."""
    settings = load_settings()
    configure_logging(settings.log_level)

    catalog_path = settings.catalog_path
    if not catalog_path:
        logger.error("No catalog configured (set catalog.path or TUNEGRAPH_CATALOG_PATH)")
        sys.exit(1)

    song_id = os.getenv("SONG_ID")
    user_id = os.getenv("USER_ID")
    prefix = os.getenv("PREFIX")
    export_path = os.getenv("EXPORT_PATH")

    logger.info("=" * 60)
    logger.info("Building tunegraph")
    logger.info("=" * 60)
    logger.info(f"Catalog: {catalog_path}")
    logger.info("=" * 60)

    try:
        app = build_app(load_catalog(catalog_path), settings)

        print(json.dumps(app.stats(), indent=2))

        if song_id:
            radio = app.recommendations.radio_queue(int(song_id))
            print(json.dumps(radio.to_dict(), indent=2))

        if user_id:
            playlist = app.recommendations.weekly_discovery(int(user_id))
            print(json.dumps(playlist.to_dict(), indent=2))
            suggestions = app.social.suggestions(int(user_id))
            print(json.dumps([asdict(s) for s in suggestions], indent=2))

        if prefix is not None:
            matches = app.search.autocomplete_titles(prefix)
            print(json.dumps([asdict(m) for m in matches], indent=2))

        if export_path:
            song_attrs = lambda sid: {"title": app.catalog.get_song(sid).title}
            export_to_json(similarity_to_networkx(app.similarity.graph, song_attrs), export_path)
    except TuneGraphError as e:
        logger.error(str(e))
        sys.exit(1)

    logger.success("Done")


if __name__ == "__main__":
    main()
