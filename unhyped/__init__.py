"""
Unhyped
=======

Reality check for beauty product recommendations: is this recommendation
genuine or promotional, and is the product itself reasonable.
"""

__version__ = "1.0.0"
