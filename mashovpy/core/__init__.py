"""Core building blocks of the Mashov client."""
