"""
Entry point for running DriverKit CLI as a module.

Usage: python -m driverkit [command] [options]
"""

from driverkit.cli.parser import main

if __name__ == "__main__":
    main()
