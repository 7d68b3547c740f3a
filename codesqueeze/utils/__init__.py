"""
Shared utilities for codesqueeze.
"""
