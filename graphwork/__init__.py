"""Graph and grid algorithms: traversals, components, shortest paths, spanning trees and searches."""

__version__ = "0.1.0"
__all__ = ["graph", "traversal", "paths", "grid", "cli"]