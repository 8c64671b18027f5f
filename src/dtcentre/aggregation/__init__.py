"""Aggregation module for report statistics.

- Groups fetched rows by one column and counts them
- Forbidden: store access, HTTP shaping
"""
