"""Postboard: auth service, REST gateway and post RPC service."""
