"""Declarative file tree installation.

This package provides the entry classes used to describe a tree of files and
directories with per-node permissions, and the installer that creates such a tree
on the filesystem.
"""
