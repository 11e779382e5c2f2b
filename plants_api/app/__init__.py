"""
Application package for the Plants API.

Subpackages are organised by responsibility: ``core`` (configuration,
logging, database handle), ``repositories`` (SQL access to the
``PLANTS`` table), ``services`` (operations exposed to the API),
``schemas`` (Pydantic payloads) and ``api`` (versioned routers).
"""
