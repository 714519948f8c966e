"""Discography command line interface."""
