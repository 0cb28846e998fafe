"""
Api proxies and api operations.
"""
