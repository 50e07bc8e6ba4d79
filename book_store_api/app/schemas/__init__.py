"""
Pydantic schema definitions for API payloads.

Schemas describe the wire representation of books and error messages.
They are separated from the store, which keeps records as plain
dictionaries exactly as they appear in the JSON file.
"""
