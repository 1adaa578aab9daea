"""Utility functions for parsing reaction data."""
