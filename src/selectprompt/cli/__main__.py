from selectprompt.cli import cli_main

cli_main()
