"""Business logic layer for files app.

This package contains the content transform pipelines:
- Ingest: compress, frame and store an upload
- Retrieval: load, unframe and decompress a stored file
- Listing of stored file metadata

Pipelines receive the store gateway explicitly and keep no state
between calls. HTTP concerns stay in views.
"""
