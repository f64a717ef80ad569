"""
connect4core.interfaces - Ways of driving a game

This package contains the command-line driver. It is not imported here so that
importing the core never parses arguments or touches the terminal.
"""

__all__ = []
