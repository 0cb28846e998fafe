"""
Time-bucketed hit statistics.
"""
