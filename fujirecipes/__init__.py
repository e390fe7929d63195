"""
Fuji recipe recommendation service.
"""
