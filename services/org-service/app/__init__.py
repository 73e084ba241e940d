"""
Org Service - sales organization hierarchy resolution.
"""
