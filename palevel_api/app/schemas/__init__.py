"""
Pydantic schema definitions for API payloads.

Request and response bodies are declared here, separately from the
service layer, so the wire representation can change without touching
storage.
"""
