"""Mashov command line interface."""
