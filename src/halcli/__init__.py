"""halcli — command-line front end for the configuration daemon.

Commands are organised as a tree of nested sub-commands; every leaf talks
to the daemon over HTTP and daemon failures are rendered by severity.
"""

from halcli.version import __version__

__all__: list[str] = ["__version__"]
