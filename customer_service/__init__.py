"""
Package root for the customer records service.
It groups the HTTP API, the customer storage layer, and shared settings under one import path.
Most functionality lives in the sibling packages; this file intentionally stays lightweight.
"""
