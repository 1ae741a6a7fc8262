"""
Core domain models and bundled resources.

Nothing here performs I/O beyond reading the species table.
"""
