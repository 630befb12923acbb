"""CRC-32 and Adler-32 checksums, bit helpers and a binary-tree LZ matchfinder."""

__version__ = "0.1.0"
__all__ = ["adler32", "bits", "bt_matchfinder", "crc32", "matchfinder"]