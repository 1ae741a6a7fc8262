"""
dendro — domain model for tree-ring dating.
"""

__version__ = "0.1.0"
