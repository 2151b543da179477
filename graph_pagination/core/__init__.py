"""Core domain: cursors, pagination requests, windowing and settings."""
