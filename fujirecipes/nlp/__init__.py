"""
Natural language parameter extraction.

Responsibilities:
- Map free-text shooting descriptions onto the six structured categories.
- Validate classifier output against the closed category enumerations.
- Fall back to deterministic keyword rules when the classifier is unavailable.
"""
