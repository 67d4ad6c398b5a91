"""Capture Curator: weighted photo ranking and shortlist service."""
