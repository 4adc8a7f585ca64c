"""Network front end for minipy sessions."""

from minipy_server.repl_server import ReplServer

__all__ = ["ReplServer"]
