"""
Configuration and logging helpers.
"""
