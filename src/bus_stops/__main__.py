from bus_stops.cli import main

main()
