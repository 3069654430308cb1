from hintalgebra.cmdline import main

main()
