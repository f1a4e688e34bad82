"""Gesturio command-line interface."""
