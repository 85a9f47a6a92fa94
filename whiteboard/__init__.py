"""
whiteboard - Resizable panel grid for presenting files in the terminal
"""

__version__ = "0.1.0"
