"""
Core module - configuration, time source and error handling.
"""
