"""Pipeline orchestration for the short-video generator."""
