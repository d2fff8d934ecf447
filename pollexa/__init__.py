"""Pollexa: a feed of two-option polls."""
