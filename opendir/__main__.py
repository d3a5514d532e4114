from opendir.cli import main

main()
