"""Deeplink parsing.

The deeplink layer converts a raw string (typed by a user or decoded from a QR code) into a strict
`DeeplinkIntent` object that a wallet can display or turn into a real transaction.
"""
