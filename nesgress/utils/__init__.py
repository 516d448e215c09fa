"""
nesgress Utilities
Terminal primitives, line formatting and CLI helpers.
"""
