"""Configuration constants, messages, and runtime settings for railstart."""
