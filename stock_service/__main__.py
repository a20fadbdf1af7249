from stock_service.server import main

main()
