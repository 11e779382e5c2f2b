"""
Plants API package.

The FastAPI application lives in :mod:`plants_api.app.main`.
"""
