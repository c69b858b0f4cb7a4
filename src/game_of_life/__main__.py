from .sequential import main

main()
