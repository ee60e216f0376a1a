# Script Agent Package
"""
Script Agent microservice.

Turns a video topic into a short spoken script using Google's Gemini Flash
model, rendered from a fixed prompt template.
"""
