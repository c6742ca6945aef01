"""Listing engine package.

The package is structured around a one-way data flow:
- `models.py` defines the normalized `Listing` record every feed is mapped to.
- `sources/` contains the interchangeable feeds (bundled data, published sheet).
- `normalize.py` contains the deterministic CSV parsing and field coercion.
- `loader.py` selects a source and publishes loaded collections.
- `query.py` filters and sorts a collection for display.
"""
