"""
filediff - Compare two text files line by line.

Prints the lines that differ between two files, each tagged with the file it
came from and colored green (added) or red (removed).
"""

__version__ = "1.0.0"
