"""Core services for AI CLI Tool."""
