"""
                Food Ordering Backend

REST backend for a food-ordering site: menu management,
contact-form submissions with email acknowledgment, and orders.

Version: 1.0.0
"""

__version__ = "1.0.0"
