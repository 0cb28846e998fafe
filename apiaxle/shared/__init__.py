"""
Shared building blocks: exceptions, the response envelope, URL helpers,
the HTTP client and the resource proxy base model.
"""
