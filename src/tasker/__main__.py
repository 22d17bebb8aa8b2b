from tasker.cli.main import main

main()
