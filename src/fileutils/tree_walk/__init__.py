"""Lazy depth-first traversal of directory trees.

This package provides an iterator that walks one or more directory trees in sorted
order, yielding each path together with its metadata and skipping nodes that cannot
be inspected.
"""
