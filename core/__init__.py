"""
Core package - Shared helpers that are not tied to a layer.
"""
