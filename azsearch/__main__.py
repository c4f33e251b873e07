from azsearch.cli import main

main()
