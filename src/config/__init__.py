"""
Configuration loading and validation for settings.

Provides strongly typed settings objects for the reference time zone,
simulated holiday latency and logging, with upfront validation.
"""
