"""Configuration: rule activation models, settings, and logging."""
