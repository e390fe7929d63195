"""
LLM integration layer.

Responsibilities:
- Manage Groq API configuration and credentials.
- Send the fixed photography-parameter instruction plus user text to Groq.
- Return the raw JSON object for validation by the NLP layer, or ``None``
  when the classifier is disabled or fails.
"""
