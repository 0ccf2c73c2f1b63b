"""
Domain layer for AppTimeline.

Contains the timeline entity record, its events and the value objects they
are built from.
"""
