"""
Recipe storage layer.

Responsibilities:
- Own the SQLite connection lifecycle (open / close) for the process.
- Create the schema and seed the fixed tag vocabulary and camera list.
- Serve the recipe corpus with tags as a DataFrame, plus simple writes for import.
"""
