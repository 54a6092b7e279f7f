"""toggle_florp.core — Foundation layer.

Contains the Color type, the literal parser, the random and hash generators,
the message resolver, settings loading and output formatting.
This module has NO dependencies on toggle_florp.__main__.
Only stdlib, numpy, and PIL are allowed here.
"""
