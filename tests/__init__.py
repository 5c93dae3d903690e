"""
Test Suite for centwise

Test Structure:
- unit/: Unit tests mirroring src/ package structure
- integration/: Configuration and CLI workflow tests

Test Categories:
- Core money arithmetic, parsing and formatting
- Settings and environment configuration
- Command-line commands
"""
