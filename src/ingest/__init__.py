"""Consumption data ingestion.

This module reads raw tabular sources and normalizes their headers
and values into typed records for the clean and derive stages.
"""
