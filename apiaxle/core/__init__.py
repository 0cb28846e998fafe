"""
Core infrastructure for the ApiAxle client: settings, logging and the
HTTP client template.
"""
