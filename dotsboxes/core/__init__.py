"""Supporting pieces around the rules (event history and text summaries).

Kept free of session and locking concerns so they can be reused by any caller.
"""
