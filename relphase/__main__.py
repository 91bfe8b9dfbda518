from relphase.cli.app import main

main()
