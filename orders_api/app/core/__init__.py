"""Configuration, logging and lifecycle management."""
