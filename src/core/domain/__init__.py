"""Domain models and errors.

Pure, strict data structures (Pydantic v2). The domain knows nothing about
terminals, files or the CLI: only purchases, items and receipts.
"""
