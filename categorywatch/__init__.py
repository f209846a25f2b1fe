"""
CategoryWatch: notify watchers of a category when pages join or leave it.
"""

__version__ = "1.3.0"
