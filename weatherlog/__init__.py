"""
weatherlog - a flat-file weather journal.

Appends day/condition/high/low records to a pipe-delimited text file
and reports simple totals over them.
"""

__version__ = "0.1.0"
