"""IPMI v2.0 and DCMI message encoding, RMCP+ key derivation and a UDP transport for BMC remote consoles."""

__version__ = "0.1.0"