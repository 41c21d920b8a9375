from minicat.cli import main

main()
