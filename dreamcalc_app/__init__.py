"""
DreamCalc App - Savings Growth and Dream Goal Calculation Engine

A financial-literacy calculator for children and families. Computes how a
recurring savings contribution grows under compound interest and how much
has to be set aside each period to afford a "dream" by a given date.
"""

__version__ = "0.1.0"
__author__ = "DreamCalc Team"
