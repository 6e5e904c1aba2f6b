"""Health & Wellness Blog API."""
