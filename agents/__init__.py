"""
Provider proxy microservices for the short-video generator.

Each agent wraps exactly one external vendor (script, voice, images) behind a
single request/response contract defined in :mod:`agents.common`.
"""
