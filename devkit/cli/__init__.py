"""
CLI Client Module.

Command-line client built with Typer for the DevKit service API.

Architecture:
- CLI is a thin presentation layer over the remote service
- Every command resolves one profile, builds one APIClient and makes one call
- Results go to stdout as tab-separated lines, errors to stderr

Usage:
    devkit login --url https://devkit.example.com --api-key KEY
    devkit apps list
    devkit secrets get SECRET_ID
"""
