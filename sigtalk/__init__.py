"""Send text between processes one bit at a time over SIGUSR1 and SIGUSR2.

Includes the bit protocol, a sending client, a receiving server, and small
string, character, printf and line-reading helpers.
"""

__version__ = "1.0.0"