"""
Services.

Request builders and the search service that drives one request per
invocation.
"""
