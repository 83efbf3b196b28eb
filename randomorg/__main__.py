"""
Entry point for running randomorg as a module: python -m randomorg
"""

from randomorg.cli.commands import app

if __name__ == "__main__":
    app()
