"""Configuration — settings models, TOML loading, and logging setup."""
