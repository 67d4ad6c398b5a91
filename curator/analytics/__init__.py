"""
Dashboard analytics.

Responsibilities:
- Keep an in-memory log of ranking, filter and shortlist events.
- Summarize how the dashboard is being used.
"""
