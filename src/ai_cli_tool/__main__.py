"""
Entry point for running AI CLI Tool as a module.

This allows users to run the CLI using:
    python -m ai_cli_tool [command] [options]
"""

from ai_cli_tool.cli.app import main

if __name__ == "__main__":
    main()
