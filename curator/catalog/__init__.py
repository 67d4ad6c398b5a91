"""
Photo catalog package.

Responsibilities:
- Generate the deterministic shoot catalog (or load a pre-built CSV).
- Normalize rows into immutable Photo records.
- Keep the catalog in memory for the lifetime of the process.
"""
