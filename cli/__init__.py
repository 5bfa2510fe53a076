"""
Command line interface for PageSift.
"""
