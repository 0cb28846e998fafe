"""
Resource domains of the ApiAxle management API: keyrings, keys, apis and
their statistics.
"""
