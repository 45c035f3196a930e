"""
Byte values of the delimiters and character classes recognized when
scanning protocol payloads.
"""

NUL = 0x00
LF = 0x0A
CR = 0x0D
CRLF = bytes([CR, LF])
COLON = 0x3A
SP = 0x20
COLSP = bytes([COLON, SP])
SLASH = 0x2F
QMARK = 0x3F
EQUALS = 0x3D

HEX_DIGITS = b"0123456789ABCDEFabcdef"
CAPITALS = b"ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Distance between an ascii capital and its lowercase form
CASE_OFFSET = 0x20
