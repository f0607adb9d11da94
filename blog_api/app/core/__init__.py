"""
Core infrastructure: configuration, logging, errors and the post store.
"""
