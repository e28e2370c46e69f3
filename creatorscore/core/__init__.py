"""Scoring engine and supporting utilities."""
