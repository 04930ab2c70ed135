"""Drive the NetLinx compiler over batches of source files."""

__version__ = "0.1.0"

app_name = "netlinx-compile"
