"""FastAPI backend for the Transcript Repurposer."""
