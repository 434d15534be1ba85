"""
Shared service utilities.

- http.py - requests session with retry/backoff, used by the dataset loader
"""
