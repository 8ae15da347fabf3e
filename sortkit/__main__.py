from sortkit.cli import main

main()
