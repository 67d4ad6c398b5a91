"""
Dashboard session package.

Responsibilities:
- Hold the per-session dashboard state (sliders, profile, filters, shortlist).
- Assemble the dashboard view from the ranking engine's output.
"""
