from svg_analyze.cli.main import main

main()
