"""
Image Agent microservice.

Searches Unsplash for stock photos matching a topic and normalizes them into
image records the video renderer can consume.
"""
