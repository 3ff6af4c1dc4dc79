from restaurant_core.entrypoints.cli import main

main()
