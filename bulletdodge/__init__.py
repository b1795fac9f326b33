"""
bulletdodge
-----------
Arcade prototype: a ship rotates and thrusts inside the screen while
bullets stream in from a path around the screen edge.
"""

__version__ = "0.1.0"
