"""
Catalog app for the cafe POS.

Products, their prices and stock counters.
"""
