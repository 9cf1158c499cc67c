"""Pydantic Schemas — request/response validation for API endpoints.

Design Decisions:
    - Separate from models and core types: schemas are the wire contract (camelCase)
"""
