"""Core domain package for ircpush.

Core contains event filtering, away tracking, and the push service without
any chat-client or socket-specific code, keeping the business logic portable.
"""
