from latestonly.cli import main

main()
