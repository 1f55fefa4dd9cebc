"""
Service client.

HTTP transport and XML deserialization for the EBI Search REST service.
"""
