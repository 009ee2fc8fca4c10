from task_manager.cli.main import main

main()
