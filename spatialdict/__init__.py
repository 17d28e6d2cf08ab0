"""Point dictionaries with exact and ball searches: linear, Morton-ordered BST and 2-d tree."""

__version__ = "0.1.0"