"""Adds issues and pull requests to GitHub projects based on label and milestone filters."""
