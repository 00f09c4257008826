"""HW Command Server package.

Text utilities for a Markdown notes vault, exposed as MCP tools and as
host-agnostic commands:

- Extract posts from HTML copied off a subreddit page and format each
  as a ``- YYYYMMDDHHmm - [title](url)`` line.
- Sort the ``- YYYYMMDD - ...`` rows of a document section, latest
  first, keeping the other lines of the section.

Usage example:
    from hw_command_server.server import main
    if __name__ == "__main__":
        main()

Note: Tools can also be imported and registered by an external MCP runtime.
"""

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
