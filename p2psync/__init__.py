"""Peer-to-peer transports, discovery, service interfaces, block sync pipeline and Fibonacci helpers."""

__version__ = "0.1.0"