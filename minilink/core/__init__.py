"""
Core module - configuration, authentication and error handling.
"""
