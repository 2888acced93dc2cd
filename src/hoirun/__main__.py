from hoirun.cli import main

main()
