"""
crates-info Tests

Unit tests for the argument interpreter, registry client and formatter.
The registry is replaced by httpx.MockTransport, no test touches the network.
"""
