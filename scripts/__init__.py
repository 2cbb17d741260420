"""Batch entry points: python -m scripts.<name>."""
