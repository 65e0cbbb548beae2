"""API module for videohub.

- Parses requests, runs validation, reads/writes the store
- Shapes records and errors into JSON responses
- Forbidden: holding state outside the injected VideoStore
"""
