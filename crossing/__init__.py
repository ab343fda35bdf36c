"""
Crossing Solver - Breadth-first search for the river crossing puzzle.
"""

__version__ = "1.0.0"
