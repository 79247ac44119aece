"""
Shared project plumbing: health checks.
"""
