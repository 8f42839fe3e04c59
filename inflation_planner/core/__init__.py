"""Numerical core: inflation paths, ensemble bands and savings solving."""
