"""
Shared service utilities.

- http.py - ``requests.Session`` with default timeout and reconnect policy
"""
