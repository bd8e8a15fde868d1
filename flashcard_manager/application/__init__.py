"""
Application layer - command handlers and the ports they depend on.

This package coordinates the relational store and the message bus to
fulfill deck and card requests.
"""
