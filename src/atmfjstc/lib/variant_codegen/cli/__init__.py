"""
Command-line front end for the generators.
"""
