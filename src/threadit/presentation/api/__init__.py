"""FastAPI application for Threadit."""
