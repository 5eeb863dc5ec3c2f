"""
Pydantic schema definitions for API payloads.

Each operation has its own request and response model.  The field
names are short (``s`` for input, ``v`` for value) because they form
the wire format.
"""
