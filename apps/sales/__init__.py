"""
Sales app for the cafe POS.

Checkout transaction processing: stock validation, tax and change
computation, the atomic commit and receipts.
"""
