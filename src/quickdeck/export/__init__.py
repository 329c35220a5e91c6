"""Deck exporters."""
