"""
Shortlist package.

Responsibilities:
- Track which frames the user marked for client delivery.
- Summarize the shortlist against the current ranking.
"""
