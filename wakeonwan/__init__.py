"""wakeonwan — send Wake-on-LAN magic packets over a network."""

__version__ = "0.1.1"
