"""Adapters – concrete fetch collaborators."""
