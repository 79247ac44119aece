"""
Sales reporting: daily summaries and date-range aggregation over transactions.
"""
