"""Adapters for the external services the pipeline calls."""
