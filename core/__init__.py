"""Core domain logic for greeting localization and vital-sign alerting.

This package contains the business logic and domain models,
isolated from concrete lookup tables and alert channels for easy testing.
"""
