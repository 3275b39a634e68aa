"""
Array-backed vs linked sequence benchmark.
"""

__version__ = "1.0.0"
