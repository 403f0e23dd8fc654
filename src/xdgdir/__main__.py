from xdgdir.cli.main import main

main()
