"""Bundled package data."""
