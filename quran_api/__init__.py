"""
Quran.com resource gateway.
"""
__version__ = "1.0.0"
