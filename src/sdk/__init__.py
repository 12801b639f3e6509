"""Python SDK for consumption analysis.

This package exposes the client and the dataset handle used by
scripts and reporting layers.
"""
