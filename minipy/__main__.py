from minipy.repl import main

main()
