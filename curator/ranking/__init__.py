"""
Photo ranking package.

Responsibilities:
- Score each photo from its metrics, the scoring weights and the client profile.
- Order the catalog best-first without dropping any photo.
- Apply the dashboard's hard filters on top of the ranking.
- Memoize rankings for repeated weight/profile combinations.
"""
