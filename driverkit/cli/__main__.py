"""
Entry point for running DriverKit CLI as a module.

Usage: python -m driverkit.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
