"""Utility modules for the proxy-regression checks."""
