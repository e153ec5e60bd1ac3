"""
crosspoint CLI - Command-line interface for the intersection engine.

Usage:
    crosspoint-cli segment 0 0 4 4 0 4 4 0
    crosspoint-cli on-segment 2 2 0 0 4 4
    crosspoint-cli rectangle 0 0 4 4 2 1 2 -5
    crosspoint-cli batch jobs.yaml
    crosspoint-cli render 0 0 4 4 2 1 2 -5 --output scene.png
"""

__version__ = "1.0.0"
