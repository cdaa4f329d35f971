"""
AssetsManager: personal finance tracking with month-over-month analytics.
"""

__version__ = "1.0.0"
