from pseudoclass.cmdline import main

main()
