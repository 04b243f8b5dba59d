"""HTTP API for the BelugaSwap SDK."""
