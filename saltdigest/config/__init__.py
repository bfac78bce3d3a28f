"""Configuration settings."""
