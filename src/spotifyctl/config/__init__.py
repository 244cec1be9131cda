"""Configuration loading and path resolution."""
