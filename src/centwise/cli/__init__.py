"""
Command Line Interface Package

Unified CLI for money arithmetic and formatting.

Command Structure:
- centwise: Main entry point with utility commands (version, config)
- centwise format / add / subtract / multiply / divide / distribute: Money operations

Display options (symbol, separators, precision, patterns, grouping) default to
the environment configuration and can be overridden per command.
"""
