"""Aggregations over derived consumption datasets.

Every function in this package is pure: it reads a dataset and
returns freshly built rows without mutating its input.
"""
