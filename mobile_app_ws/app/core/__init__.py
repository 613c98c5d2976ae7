"""
Cross‑cutting infrastructure: configuration, logging, database access,
identifier generation, validation, content negotiation and error
translation.
"""
