"""
Recipe import package.

Responsibilities:
- Normalise scraped or hand-entered recipe records into the stored schema.
- Generate descriptions and assign tags from each recipe's settings and name.
- Insert, skip or update recipes in the store and link them to every camera.
"""
