"""Presentation layer - wire document schemas."""
