"""
darts501 - two-player 501 scoring driven by dartboard segment identifiers.
"""
__version__ = "0.1.0"
