"""
Recipe recommendation engine.

Responsibilities:
- Hold the tag vocabulary and per-category weights.
- Expand structured shooting conditions into weighted target tags.
- Score and rank the recipe corpus by tag overlap.
- Explain each ranked recipe from the tags it matched.
"""
