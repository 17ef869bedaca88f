"""
Application Modules.

- backend/: API, services, in-memory repositories, configuration
"""
