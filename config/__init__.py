"""Configuration package for Catalog Report."""
