"""Routing — template compiler and ordered route table with best-match lookup.

Routes are compiled once at registration and scanned in registration
order on every lookup.
"""
