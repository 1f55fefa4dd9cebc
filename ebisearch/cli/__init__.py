"""
CLI Presentation Layer.

Method registry, usage text and response printers used by cli.py.

Architecture:
- cli.py parses flags and picks the method
- services/ fetches and deserializes the response
- printers turn response models into stdout lines
"""
