"""
Unhyped API
===========

FastAPI application exposing the reality check and the personal fit report.

Usage:
    uvicorn unhyped.api.main:app --port 8000
"""
