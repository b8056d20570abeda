"""Renderers that turn a tree into connector-drawn text."""
