"""Assessment implementations.

Each module in this package implements a specific assessment following the
pattern:
- Constructor: __init__(request, config=None)
- Run method: run() -> pydantic result model
"""
