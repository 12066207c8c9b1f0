"""MIME codecs, codec chains, header field values, a message body type and a mail-tool option parser."""

__version__ = "0.1.0"