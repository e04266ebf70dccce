"""
Daily Walker backend - loop route generation and route logging
"""
__version__ = "1.0.0"
