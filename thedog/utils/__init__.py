"""Configuration and logging helpers shared by every layer."""
