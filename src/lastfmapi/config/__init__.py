"""Configuration package: paths, TOML config file and client settings."""
