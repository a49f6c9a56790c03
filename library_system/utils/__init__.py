"""Library System - CLI Utilities Package

This package contains helper modules for the console interface:
- Input validation
- Output rendering (plain, json, rich)
- CLI preference file
"""
