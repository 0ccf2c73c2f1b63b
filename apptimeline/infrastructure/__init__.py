"""
Infrastructure layer - configuration and wire encoding.
"""
