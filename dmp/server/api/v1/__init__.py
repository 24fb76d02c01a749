"""
Version 1 of the DMP REST API, mounted under ``/api/v1``.
"""
