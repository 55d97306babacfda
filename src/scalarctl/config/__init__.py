"""Configuration — settings discovery, section models, and logging setup."""
