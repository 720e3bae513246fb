"""
Integration tests exercising real stdlib handlers, files and the CLI.
"""
