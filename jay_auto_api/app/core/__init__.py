"""
Cross‑cutting pieces: configuration, logging, errors, security and the
repository that owns every collection.
"""
