#!/usr/bin/env python
"""Start the stock service on SERVICE_ADDR_STOCK (default [::1]:50073)."""
from stock_service.server import main

if __name__ == "__main__":
    main()
