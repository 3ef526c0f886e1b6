"""FocusFlow HTTP API - FastAPI application and routes under /api"""
