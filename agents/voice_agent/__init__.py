"""
Voice Agent microservice.

Synthesizes a script to MP3 speech with ElevenLabs and returns it base64
encoded for JSON transport.
"""
