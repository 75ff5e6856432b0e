"""
Pydantic schema definitions for API payloads.

The endpoints return rows exactly as the store holds them, so these
models only describe the responses in the OpenAPI document.  Row models
allow extra fields: a column added to the store appears in responses
without a schema change.
"""
