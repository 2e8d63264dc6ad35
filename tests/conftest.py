"""Pytest configuration and sys.path adjustments for local runs."""

# Ensure the service modules import the same way they do when the server runs
import os
import sys

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
SERVER_DIR = os.path.join(ROOT, 'proxy-server')

if SERVER_DIR not in sys.path:
    sys.path.insert(0, SERVER_DIR)
