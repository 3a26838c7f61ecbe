"""Configuration loading from YAML, .env files and environment variables."""
