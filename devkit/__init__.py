"""
devkit - command-line client for the DevKit configuration and secrets service.

The CLI authenticates with per-profile API keys stored under ~/.devkit,
issues one request against the /api/v1 REST API per invocation and prints
the result as tab-separated text.
"""

__version__ = "0.1.0"
__app_name__ = "devkit"
