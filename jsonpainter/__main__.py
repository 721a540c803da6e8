from jsonpainter.cli import main

main()
