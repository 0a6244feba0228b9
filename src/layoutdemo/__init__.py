"""
layoutdemo: a static layout demo screen composed from immutable node trees
and rendered with Tk.
"""

__version__ = "0.1.0"
