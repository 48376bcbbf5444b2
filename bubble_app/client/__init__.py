"""
Upstream access: quote endpoint through CORS proxy relays, and the company roster.
"""
