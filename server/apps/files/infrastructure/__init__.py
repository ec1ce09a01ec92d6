"""Infrastructure layer for files app.

This package contains the building blocks the pipelines are made of:
- Fixed-size framing of stored payloads
- Whole-buffer gzip compression
- Database-backed store gateway

Keep infrastructure concerns separate from business logic.
"""
