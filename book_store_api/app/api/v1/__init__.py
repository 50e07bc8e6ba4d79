"""Version 1 of the Book Store API."""
