"""Core services for globalog."""
