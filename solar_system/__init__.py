"""Approximate animated Solar System: orbit layout, stepping and rendering."""
