"""
Transport plumbing shared by the API modules.

- http.py - requests.Session factory (no retries) and the request/decode step
"""
