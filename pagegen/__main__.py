from pagegen.cli import main

main()
