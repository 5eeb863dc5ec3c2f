"""
Service layer abstraction.

Services hold the business logic and know nothing about HTTP or
JSON.  The API layer adapts them to the outside world.
"""
