"""
Quotebook Test Suite
====================

This package contains tests for the Quotebook service including:
- Unit tests for individual components
- Integration tests for complete HTTP workflows
"""
