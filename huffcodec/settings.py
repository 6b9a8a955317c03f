"""
settings.py

Shared constants for huffcodec.
"""

FILE_SIGNATURE = b"HUF"
FORMAT_VERSION = 1

# bytes read per chunk during the frequency pass
READ_CHUNK_SIZE = 65536

SYMBOL_COUNT = 256
