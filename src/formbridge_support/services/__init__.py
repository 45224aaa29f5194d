"""Retrieval, prompt assembly and orchestration services used by handlers.

Services are imported lazily by handlers so boto3 clients are only built on
the routes that need them.
"""
