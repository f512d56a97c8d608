# Schemas package init
"""
Rocks API — Pydantic Schemas
==============================

What:  Response models that define the JSON contract of the API and feed
       FastAPI's OpenAPI document.
"""
