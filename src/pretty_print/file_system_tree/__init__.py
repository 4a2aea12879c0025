"""Filesystem tree rendering with pruning to accepted files.

This package provides the node and tree classes used to draw the structure section of
the output, the glyph sets used to draw branches, and the path classification
predicates shared with file collection.
"""
