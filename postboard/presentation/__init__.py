"""Presentation layer: REST (FastAPI) and RPC (gRPC) entry points."""
