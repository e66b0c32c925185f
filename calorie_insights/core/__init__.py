"""
Decoding, reporting and configuration core.
"""
