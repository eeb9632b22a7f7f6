"""
Generic utility functions shared across modules.

Includes the clock abstraction used for "now" and the package logging setup.
"""
