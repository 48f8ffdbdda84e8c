"""
ReID Viewer - side-by-side image comparison driven by a precomputed similarity table.
"""

__version__ = "0.1.0"
