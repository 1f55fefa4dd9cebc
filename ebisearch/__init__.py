"""
EBI Search REST client.

- core/: Configuration, logging, exceptions
- client/: HTTP transport and XML deserializer
- schemas/: Typed response models
- services/: Request builders and the search service
- cli/: Method registry, usage text and response printers
"""

__version__ = "0.1.0"
