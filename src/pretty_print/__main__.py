from pretty_print.cli.main import main

main()
