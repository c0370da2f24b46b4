"""
Application layer for the lift logic core.

This package contains:
- ports/: Abstract repository interfaces (what the engines need)
- exceptions: Errors raised for invalid caller input
"""
